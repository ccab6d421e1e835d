"""Use case turning a notifiable event into a delivered notification."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from notification_hub.domain.entities import Notifiable, Notification

from .create_notification import create_notification
from .notify_users import notify_users
from .recipients import resolve_recipients

logger = logging.getLogger(__name__)


def create_notification_and_notify(
    session: Session, notifiable: Notifiable
) -> Notification | None:
    """Store a notification for ``notifiable`` and deliver it to its recipients.

    Returns ``None`` without writing anything when nobody would receive it.
    """

    recipients = resolve_recipients(session, notifiable)
    if not recipients:
        logger.debug(
            "No recipients for %s notification; skipping", notifiable.action_key
        )
        return None

    resource_id = notifiable.resource.id if notifiable.resource is not None else None
    notification = create_notification(
        session,
        action_key=notifiable.action_key,
        icon_key=notifiable.icon_key,
        resource_id=resource_id,
        details=notifiable.notification_details,
        doer=notifiable.doer,
    )
    notify_users(session, notification, sorted(recipients))
    logger.info(
        "Notification %s (%s) delivered to %d users",
        notification.id,
        notification.action_key,
        len(recipients),
    )
    return notification


__all__ = ["create_notification_and_notify"]
