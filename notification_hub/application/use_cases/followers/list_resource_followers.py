"""Use case for listing who follows a resource."""

from sqlalchemy.orm import Session

from notification_hub.infrastructure.repositories import FollowerResourceRepository
from notification_hub.utils import get_resource_hash


def list_resource_followers(
    session: Session, resource_id: int, resource_class: str
) -> set[int]:
    """Return the distinct ids of the users following the resource."""

    repository = FollowerResourceRepository(session)
    return repository.list_follower_ids(get_resource_hash(resource_id, resource_class))
