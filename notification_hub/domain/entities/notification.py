"""Domain entities describing notifications and their per-user read state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Notification:
    """Something that happened, stored once and shared by every recipient.

    ``icon_color`` is derived while rendering and never persisted.
    """

    id: int | None
    action_key: str
    icon_key: str = ""
    resource_id: int | None = None
    user_id: int | None = None
    details: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    icon_color: str | None = None


@dataclass
class NotificationViewer:
    """Read state of a :class:`Notification` for a single recipient."""

    id: int | None
    notification: Notification
    viewer_id: int
    status: bool = False

    @property
    def is_viewed(self) -> bool:
        return self.status


__all__ = ["Notification", "NotificationViewer"]
