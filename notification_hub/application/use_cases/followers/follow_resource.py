"""Use case for following a resource."""

import logging

from sqlalchemy.orm import Session

from notification_hub.domain.entities import FollowerResource
from notification_hub.infrastructure.repositories import FollowerResourceRepository
from notification_hub.utils import get_resource_hash

logger = logging.getLogger(__name__)


def follow_resource(
    session: Session, user_id: int, resource_id: int, resource_class: str
) -> FollowerResource:
    """Make ``user_id`` follow the resource and return the relation.

    Following twice is harmless: the existing relation is returned and
    nothing is written.
    """

    repository = FollowerResourceRepository(session)
    resource_hash = get_resource_hash(resource_id, resource_class)
    existing = repository.get_by_follower_and_hash(user_id, resource_hash)
    if existing is not None:
        return existing

    relation = repository.create(
        FollowerResource(
            id=None,
            follower_id=user_id,
            resource_id=resource_id,
            resource_class=resource_class,
            hash=resource_hash,
        )
    )
    logger.info(
        "User %s now follows %s #%s", user_id, resource_class, resource_id
    )
    return relation
