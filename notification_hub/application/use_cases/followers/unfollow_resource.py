"""Use case for unfollowing a resource."""

import logging

from sqlalchemy.orm import Session

from notification_hub.domain.entities import FollowerResource
from notification_hub.infrastructure.repositories import FollowerResourceRepository

from .get_follower_resource import get_follower_resource

logger = logging.getLogger(__name__)


def unfollow_resource(
    session: Session, user_id: int, resource_id: int, resource_class: str
) -> FollowerResource | None:
    """Remove the follow relation and return it, or ``None`` if there was none."""

    relation = get_follower_resource(session, user_id, resource_id, resource_class)
    if relation is None:
        logger.debug(
            "User %s does not follow %s #%s; nothing to remove",
            user_id,
            resource_class,
            resource_id,
        )
        return None

    FollowerResourceRepository(session).delete(relation.id)
    return relation
