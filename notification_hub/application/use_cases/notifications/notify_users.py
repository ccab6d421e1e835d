"""Use case for fanning a notification out to its recipients."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.orm import Session

from notification_hub.domain.entities import Notification
from notification_hub.infrastructure.repositories import NotificationViewerRepository


def notify_users(
    session: Session, notification: Notification, user_ids: Iterable[int | None]
) -> Notification:
    """Create an unviewed viewer row of ``notification`` for each user id.

    ``None`` ids are skipped. All rows are committed together.
    """

    if notification.id is None:
        raise ValueError("Notification must be stored before notifying users")

    NotificationViewerRepository(session).create_many(notification.id, user_ids)
    return notification


__all__ = ["notify_users"]
