"""Use cases handling the read state of delivered notifications."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.orm import Session

from notification_hub.domain.entities import Actor
from notification_hub.infrastructure.repositories import NotificationViewerRepository


def mark_notifications_as_viewed(
    session: Session, viewer_row_ids: Iterable[int]
) -> None:
    """Flag the given viewer rows as viewed. Already viewed rows are left as is."""

    ids = list(viewer_row_ids or ())
    if not ids:
        return
    NotificationViewerRepository(session).mark_as_viewed(ids)


def count_unviewed_notifications(
    session: Session,
    viewer_id: int | None = None,
    *,
    current_actor: Actor | None = None,
) -> int:
    """Return how many notifications ``viewer_id`` has not seen yet.

    Falls back to ``current_actor`` when no viewer id is given.
    """

    if not viewer_id:
        if current_actor is None:
            raise ValueError("A viewer id or the current actor is required")
        viewer_id = current_actor.id
    return int(NotificationViewerRepository(session).count_unviewed(viewer_id))


__all__ = ["count_unviewed_notifications", "mark_notifications_as_viewed"]
