"""Use case for storing a notification."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from notification_hub.domain.entities import Actor, Notification
from notification_hub.infrastructure.repositories import NotificationRepository
from notification_hub.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    action_key: str,
    icon_key: str = "",
    resource_id: int | None = None,
    details: dict[str, Any] | None = None,
    doer: Actor | None = None,
    current_actor: Actor | None = None,
) -> Notification:
    """Persist a notification caused by ``doer`` (or ``current_actor``).

    When the details carry no ``doer`` entry the actor's display fields are
    copied in, so later profile changes do not alter stored notifications.
    Notifications without an actor are system notifications.
    """

    actor = doer if doer is not None else current_actor
    doer_id = actor.id if actor is not None else None

    payload = dict(details or {})
    if "doer" not in payload and doer_id:
        payload["doer"] = actor.display_fields()

    notification = Notification(
        id=None,
        action_key=action_key,
        icon_key=icon_key or "",
        resource_id=resource_id,
        user_id=doer_id,
        details=payload,
        created_at=now_in_app_timezone(),
    )
    saved = NotificationRepository(session).create(notification)
    logger.debug("Stored notification %s (%s)", saved.id, saved.action_key)
    return saved


__all__ = ["create_notification"]
