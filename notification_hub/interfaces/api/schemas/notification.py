"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotifiableResourceIn(BaseModel):
    """Resource an event concerns."""

    id: int
    class_name: str = Field(..., min_length=1, max_length=255)


class NotificationCreate(BaseModel):
    """Event to turn into a notification for the interested users."""

    action_key: str = Field(..., min_length=1, max_length=255)
    icon_key: str = Field(default="", max_length=255)
    resource: NotifiableResourceIn | None = None
    send_to_followers: bool = True
    include_user_ids: list[int] = Field(default_factory=list)
    exclude_user_ids: list[int] = Field(default_factory=list)
    details: dict[str, Any] = Field(default_factory=dict)


class NotificationMarkViewedRequest(BaseModel):
    """Payload used to mark a batch of viewer rows as viewed."""

    ids: list[int] = Field(default_factory=list, description="Identificadores de filas de lectura")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action_key: str
    icon_key: str = ""
    icon_color: str | None = None
    resource_id: int | None = None
    user_id: int | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None


class NotificationViewerRead(BaseModel):
    """Read state of a notification for the authenticated user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    viewer_id: int
    status: bool
    notification: NotificationRead


class NotificationFeedRead(BaseModel):
    """One page of the feed plus the rendered content of each row."""

    page: int
    page_size: int
    total_items: int
    total_pages: int
    has_previous: bool
    has_next: bool
    items: list[NotificationViewerRead]
    views: dict[str, Any] = Field(default_factory=dict)


class UnviewedCountRead(BaseModel):
    total: int


__all__ = [
    "NotifiableResourceIn",
    "NotificationCreate",
    "NotificationFeedRead",
    "NotificationMarkViewedRequest",
    "NotificationRead",
    "NotificationViewerRead",
    "UnviewedCountRead",
]
