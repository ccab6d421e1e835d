"""ORM models used by the application infrastructure."""

from .follower_resource import FollowerResourceModel
from .notification import NotificationModel
from .notification_viewer import NotificationViewerModel

__all__ = [
    "FollowerResourceModel",
    "NotificationModel",
    "NotificationViewerModel",
]
