"""Tests for the paginated, rendered notification feed."""

from datetime import datetime, timedelta, timezone

import pytest

from notification_hub.application.use_cases.notifications import (
    NotificationPageNotFoundError,
    count_unviewed_notifications,
    get_user_notifications_page,
    mark_notifications_as_viewed,
    notify_users,
    render_user_feed_page,
)
from notification_hub.domain.entities import Notification
from notification_hub.infrastructure.repositories import (
    NotificationRepository,
    NotificationViewerRepository,
)

START = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _deliver(session, action_key, *, minutes, viewer_id=1, icon_key="", details=None):
    notification = NotificationRepository(session).create(
        Notification(
            id=None,
            action_key=action_key,
            icon_key=icon_key,
            details=details or {},
            created_at=START + timedelta(minutes=minutes),
        )
    )
    notify_users(session, notification, [viewer_id])
    return notification


def _render_comment(viewer, system_name):
    return f"[{system_name}] {viewer.notification.details.get('text', '')}"


def test_pages_are_newest_first_and_bounded(session):
    for minute in range(5):
        _deliver(session, f"action-{minute}", minutes=minute)

    first = get_user_notifications_page(session, 1, page=1, page_size=2)
    last = get_user_notifications_page(session, 1, page=3, page_size=2)

    assert [v.notification.action_key for v in first.items] == ["action-4", "action-3"]
    assert [v.notification.action_key for v in last.items] == ["action-0"]
    assert first.total_items == 5
    assert first.total_pages == 3
    assert first.has_next and not first.has_previous
    assert last.has_previous and not last.has_next


def test_page_beyond_last_is_not_found(session):
    _deliver(session, "resource-comment", minutes=0)

    with pytest.raises(NotificationPageNotFoundError) as excinfo:
        get_user_notifications_page(session, 1, page=2, page_size=10)

    assert excinfo.value.total_pages == 1


def test_page_below_one_is_not_found(session):
    with pytest.raises(NotificationPageNotFoundError):
        get_user_notifications_page(session, 1, page=0, page_size=10)


def test_empty_feed_has_a_first_page(session):
    page = get_user_notifications_page(session, 1, page=1, page_size=10)

    assert page.items == []
    assert page.total_pages == 1


def test_page_size_must_be_positive(session):
    with pytest.raises(ValueError):
        get_user_notifications_page(session, 1, page=1, page_size=0)


def test_feed_only_contains_the_users_rows(session):
    _deliver(session, "resource-comment", minutes=0, viewer_id=1)
    _deliver(session, "resource-comment", minutes=1, viewer_id=2)

    page = get_user_notifications_page(session, 1, page=1, page_size=10)

    assert [viewer.viewer_id for viewer in page.items] == [1]


def test_render_uses_registered_renderers_and_marks_page_viewed(session, registry):
    registry.register("resource-comment", _render_comment)
    _deliver(session, "resource-comment", minutes=0, details={"text": "hello"})
    _deliver(session, "unknown-action", minutes=1)

    rendered = render_user_feed_page(
        session, 1, page=1, page_size=10, registry=registry, system_name="Hub"
    )

    comment_row, unknown_row = rendered.page.items[1], rendered.page.items[0]
    assert rendered.views == {str(comment_row.id): "[Hub] hello"}
    assert str(unknown_row.id) not in rendered.views
    assert count_unviewed_notifications(session, 1) == 0


def test_render_marks_only_the_rendered_page(session, registry):
    for minute in range(3):
        _deliver(session, "resource-comment", minutes=minute)

    render_user_feed_page(
        session, 1, page=1, page_size=2, registry=registry, system_name="Hub"
    )

    assert count_unviewed_notifications(session, 1) == 1
    oldest = get_user_notifications_page(session, 1, page=2, page_size=2).items[0]
    assert oldest.status is False


def test_render_marks_unviewed_rows_in_one_batch(session, registry, monkeypatch):
    _deliver(session, "resource-comment", minutes=0)
    second = _deliver(session, "resource-comment", minutes=1)
    viewed = NotificationViewerRepository(session).list_for_notification(second.id)
    mark_notifications_as_viewed(session, [viewed[0].id])

    calls = []
    original = NotificationViewerRepository.mark_as_viewed

    def spy(self, ids):
        calls.append(sorted(ids))
        return original(self, ids)

    monkeypatch.setattr(NotificationViewerRepository, "mark_as_viewed", spy)

    rendered = render_user_feed_page(
        session, 1, page=1, page_size=10, registry=registry, system_name="Hub"
    )

    unviewed_row = rendered.page.items[1]
    assert calls == [[unviewed_row.id]]


def test_render_assigns_icon_colors(session, registry):
    received = []
    registry.register("resource-comment", lambda viewer, _: received.append(viewer))
    _deliver(session, "resource-comment", minutes=0, icon_key="comment")
    _deliver(session, "resource-comment", minutes=1, icon_key="comment")
    _deliver(session, "resource-comment", minutes=2)

    render_user_feed_page(
        session, 1, page=1, page_size=10, registry=registry, system_name="Hub"
    )

    colors = [viewer.notification.icon_color for viewer in received]
    assert colors[0] is None
    assert colors[1] is not None
    assert colors[1] == colors[2]


def test_render_of_missing_page_marks_nothing(session, registry):
    _deliver(session, "resource-comment", minutes=0)

    with pytest.raises(NotificationPageNotFoundError):
        render_user_feed_page(
            session, 1, page=4, page_size=10, registry=registry, system_name="Hub"
        )

    assert count_unviewed_notifications(session, 1) == 1
