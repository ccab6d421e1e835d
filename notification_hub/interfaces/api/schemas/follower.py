"""Follow relation schemas."""

from pydantic import BaseModel, ConfigDict, Field


class FollowRequest(BaseModel):
    resource_id: int
    resource_class: str = Field(..., min_length=1, max_length=255)


class FollowerResourceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    follower_id: int
    resource_id: int
    resource_class: str
    hash: str


class ResourceFollowersRead(BaseModel):
    resource_id: int
    resource_class: str
    follower_ids: list[int]


__all__ = ["FollowRequest", "FollowerResourceRead", "ResourceFollowersRead"]
