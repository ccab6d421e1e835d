"""Use cases serving the paginated notification feed of a user."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from notification_hub.domain.entities import (
    NotificationViewer,
    NotificationViewerPage,
    RenderedFeedPage,
)
from notification_hub.infrastructure.notifications import NotificationRendererRegistry
from notification_hub.infrastructure.repositories import NotificationViewerRepository
from notification_hub.utils import ColorChooser

from .viewers import mark_notifications_as_viewed

logger = logging.getLogger(__name__)


class NotificationPageNotFoundError(LookupError):
    """Raised when the requested feed page does not exist."""

    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(f"Page {page} is out of range (1-{total_pages})")
        self.page = page
        self.total_pages = total_pages


def get_user_notifications_page(
    session: Session, viewer_id: int, *, page: int = 1, page_size: int
) -> NotificationViewerPage:
    """Return one page of ``viewer_id``'s notifications, newest first.

    Page 1 always exists, even for an empty feed. Any page outside
    ``1..total_pages`` raises :class:`NotificationPageNotFoundError`.
    """

    if page_size < 1:
        raise ValueError("page_size must be a positive integer")

    repository = NotificationViewerRepository(session)
    total_items = repository.count_for_user(viewer_id)
    result = NotificationViewerPage(
        items=[], page=page, page_size=page_size, total_items=total_items
    )
    if page < 1 or page > result.total_pages:
        raise NotificationPageNotFoundError(page, result.total_pages)

    result.items = list(
        repository.list_for_user(
            viewer_id, offset=(page - 1) * page_size, limit=page_size
        )
    )
    return result


def render_notifications(
    session: Session,
    viewers: list[NotificationViewer],
    *,
    registry: NotificationRendererRegistry,
    system_name: str,
) -> dict[str, Any]:
    """Render ``viewers`` in order and mark the unviewed ones as viewed.

    Rows whose action has no renderer are left out of the result but are
    still marked as viewed.
    """

    views: dict[str, Any] = {}
    color_chooser = ColorChooser()
    unviewed_ids: list[int] = []
    for viewer in viewers:
        notification = viewer.notification
        if notification.icon_key:
            notification.icon_color = color_chooser.get_color_for_name(
                notification.icon_key
            )
        event_name = registry.event_name_for(notification.action_key)
        if registry.has_renderer(event_name):
            views[str(viewer.id)] = registry.render(event_name, viewer, system_name)
        else:
            logger.debug("No renderer registered for %s", event_name)
        if not viewer.status:
            unviewed_ids.append(viewer.id)

    mark_notifications_as_viewed(session, unviewed_ids)
    return views


def render_user_feed_page(
    session: Session,
    viewer_id: int,
    *,
    page: int = 1,
    page_size: int,
    registry: NotificationRendererRegistry,
    system_name: str,
) -> RenderedFeedPage:
    """Fetch, render and mark as viewed one page of ``viewer_id``'s feed."""

    feed_page = get_user_notifications_page(
        session, viewer_id, page=page, page_size=page_size
    )
    views = render_notifications(
        session, feed_page.items, registry=registry, system_name=system_name
    )
    return RenderedFeedPage(page=feed_page, views=views)


__all__ = [
    "NotificationPageNotFoundError",
    "get_user_notifications_page",
    "render_notifications",
    "render_user_feed_page",
]
