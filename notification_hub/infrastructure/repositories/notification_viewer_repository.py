"""Persistence helpers for notification viewer rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session, contains_eager

from notification_hub.domain.entities import NotificationViewer
from notification_hub.infrastructure.models import (
    NotificationModel,
    NotificationViewerModel,
)

from .notification_repository import NotificationRepository


class NotificationViewerRepository:
    """Provide CRUD operations for :class:`NotificationViewer` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create_many(
        self, notification_id: int, viewer_ids: Iterable[int | None]
    ) -> list[NotificationViewer]:
        """Add one unviewed row per recipient and commit them together."""

        models = []
        for viewer_id in viewer_ids:
            if viewer_id is None:
                continue
            model = NotificationViewerModel(
                notification_id=notification_id,
                viewer_id=viewer_id,
                status=False,
            )
            self.session.add(model)
            models.append(model)
        self.session.commit()
        return [self._to_entity(model) for model in models]

    def get(self, viewer_row_id: int) -> NotificationViewer | None:
        model = self.session.get(NotificationViewerModel, viewer_row_id)
        return self._to_entity(model) if model else None

    def list_for_notification(self, notification_id: int) -> Sequence[NotificationViewer]:
        query = (
            self.session.query(NotificationViewerModel)
            .filter(NotificationViewerModel.notification_id == notification_id)
            .order_by(NotificationViewerModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(
        self,
        viewer_id: int,
        *,
        offset: int = 0,
        limit: int | None = None,
    ) -> Sequence[NotificationViewer]:
        """Return the rows of ``viewer_id`` ordered newest notification first."""

        query = (
            self.session.query(NotificationViewerModel)
            .join(NotificationViewerModel.notification)
            .options(contains_eager(NotificationViewerModel.notification))
            .filter(NotificationViewerModel.viewer_id == viewer_id)
            .order_by(
                NotificationModel.created_at.desc(),
                NotificationViewerModel.id.desc(),
            )
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_user(self, viewer_id: int) -> int:
        return (
            self.session.query(func.count(NotificationViewerModel.id))
            .filter(NotificationViewerModel.viewer_id == viewer_id)
            .scalar()
            or 0
        )

    def count_unviewed(self, viewer_id: int) -> int:
        return (
            self.session.query(func.count(NotificationViewerModel.id))
            .filter(NotificationViewerModel.viewer_id == viewer_id)
            .filter(NotificationViewerModel.status.is_(False))
            .scalar()
            or 0
        )

    def mark_as_viewed(self, viewer_row_ids: Iterable[int]) -> int:
        """Flag the given rows as viewed and return how many were still unviewed."""

        ids = {row_id for row_id in viewer_row_ids if row_id is not None}
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationViewerModel)
            .filter(
                NotificationViewerModel.id.in_(ids),
                NotificationViewerModel.status.is_(False),
            )
            .update({NotificationViewerModel.status: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: NotificationViewerModel) -> NotificationViewer:
        return NotificationViewer(
            id=model.id,
            notification=NotificationRepository._to_entity(model.notification),
            viewer_id=model.viewer_id,
            status=bool(model.status),
        )


__all__ = ["NotificationViewerRepository"]
