from .follower import FollowerResourceRead, FollowRequest, ResourceFollowersRead
from .notification import (
    NotifiableResourceIn,
    NotificationCreate,
    NotificationFeedRead,
    NotificationMarkViewedRequest,
    NotificationRead,
    NotificationViewerRead,
    UnviewedCountRead,
)

__all__ = [
    "FollowRequest",
    "FollowerResourceRead",
    "NotifiableResourceIn",
    "NotificationCreate",
    "NotificationFeedRead",
    "NotificationMarkViewedRequest",
    "NotificationRead",
    "NotificationViewerRead",
    "ResourceFollowersRead",
    "UnviewedCountRead",
]
