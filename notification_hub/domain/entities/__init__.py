"""Domain entities exposed by the application."""

from .feed import NotificationViewerPage, RenderedFeedPage
from .follower_resource import FollowerResource
from .notifiable import Actor, Notifiable, NotifiableResource
from .notification import Notification, NotificationViewer

__all__ = [
    "Actor",
    "FollowerResource",
    "Notifiable",
    "NotifiableResource",
    "Notification",
    "NotificationViewer",
    "NotificationViewerPage",
    "RenderedFeedPage",
]
