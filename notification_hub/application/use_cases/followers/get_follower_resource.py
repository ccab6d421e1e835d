"""Use case for retrieving a single follow relation."""

from sqlalchemy.orm import Session

from notification_hub.domain.entities import FollowerResource
from notification_hub.infrastructure.repositories import FollowerResourceRepository
from notification_hub.utils import get_resource_hash


def get_follower_resource(
    session: Session, user_id: int, resource_id: int, resource_class: str
) -> FollowerResource | None:
    """Return the relation between ``user_id`` and the resource, if any."""

    repository = FollowerResourceRepository(session)
    return repository.get_by_follower_and_hash(
        user_id, get_resource_hash(resource_id, resource_class)
    )
