"""Inputs describing an event that may produce a notification."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Actor:
    """User who performs an action, with the fields shown next to notifications."""

    id: int
    first_name: str = ""
    last_name: str = ""
    avatar: str | None = None
    public_url: str | None = None

    def display_fields(self) -> dict[str, Any]:
        """Return the snapshot embedded in notification details under ``doer``."""

        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "avatar": self.avatar,
            "publicUrl": self.public_url,
        }


@dataclass(frozen=True)
class NotifiableResource:
    """Reference to the resource an event concerns."""

    id: int
    class_name: str


@dataclass
class Notifiable:
    """Event describing what happened, who caused it and who should be told.

    Followers of ``resource`` are notified when ``send_to_followers`` is set.
    ``include_user_ids`` are always added, ``exclude_user_ids`` always removed,
    and the ``doer`` never notifies itself.
    """

    action_key: str
    icon_key: str = ""
    resource: NotifiableResource | None = None
    send_to_followers: bool = True
    include_user_ids: Collection[int] = field(default_factory=tuple)
    exclude_user_ids: Collection[int] = field(default_factory=tuple)
    doer: Actor | None = None
    notification_details: dict[str, Any] = field(default_factory=dict)


__all__ = ["Actor", "Notifiable", "NotifiableResource"]
