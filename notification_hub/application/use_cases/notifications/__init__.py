"""Use cases creating, delivering and displaying notifications."""

from .create_and_notify import create_notification_and_notify
from .create_notification import create_notification
from .feed import (
    NotificationPageNotFoundError,
    get_user_notifications_page,
    render_notifications,
    render_user_feed_page,
)
from .notify_users import notify_users
from .recipients import resolve_recipients
from .viewers import count_unviewed_notifications, mark_notifications_as_viewed

__all__ = [
    "NotificationPageNotFoundError",
    "count_unviewed_notifications",
    "create_notification",
    "create_notification_and_notify",
    "get_user_notifications_page",
    "mark_notifications_as_viewed",
    "notify_users",
    "render_notifications",
    "render_user_feed_page",
    "resolve_recipients",
]
