"""Aggregate application use cases."""

from .followers import follow_resource, get_follower_resource, unfollow_resource
from .notifications import (
    count_unviewed_notifications,
    create_notification_and_notify,
    mark_notifications_as_viewed,
    render_user_feed_page,
)

__all__ = [
    "count_unviewed_notifications",
    "create_notification_and_notify",
    "follow_resource",
    "get_follower_resource",
    "mark_notifications_as_viewed",
    "render_user_feed_page",
    "unfollow_resource",
]
