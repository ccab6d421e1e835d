"""Use cases for managing follow relations."""

from .follow_resource import follow_resource
from .get_follower_resource import get_follower_resource
from .list_resource_followers import list_resource_followers
from .unfollow_resource import unfollow_resource

__all__ = [
    "follow_resource",
    "get_follower_resource",
    "list_resource_followers",
    "unfollow_resource",
]
