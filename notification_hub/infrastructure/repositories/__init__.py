"""Repository implementations for infrastructure layer."""

from .follower_resource_repository import FollowerResourceRepository
from .notification_repository import NotificationRepository
from .notification_viewer_repository import NotificationViewerRepository

__all__ = [
    "FollowerResourceRepository",
    "NotificationRepository",
    "NotificationViewerRepository",
]
