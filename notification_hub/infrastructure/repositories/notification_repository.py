"""Persistence helpers for notification entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notification_hub.domain.entities import Notification
from notification_hub.infrastructure.models import NotificationModel
from notification_hub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide create and read operations for :class:`Notification` objects.

    Notifications are immutable once stored, so there is no update path.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def count(self) -> int:
        return self.session.query(NotificationModel).count()

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            action_key=notification.action_key,
            icon_key=notification.icon_key or "",
            resource_id=notification.resource_id,
            user_id=notification.user_id,
            details=dict(notification.details or {}),
            created_at=(
                ensure_app_naive_datetime(notification.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            action_key=model.action_key,
            icon_key=model.icon_key or "",
            resource_id=model.resource_id,
            user_id=model.user_id,
            details=dict(model.details or {}),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
