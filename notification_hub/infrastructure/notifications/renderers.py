"""Registry of renderers turning stored notifications into feed content."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from notification_hub.domain.entities import NotificationViewer

logger = logging.getLogger(__name__)

EVENT_NAME_PREFIX = "create_notification_item_"

NotificationRenderer = Callable[[NotificationViewer, str], Any]


class NotificationRendererRegistry:
    """Map notification event names to the renderer that displays them.

    Event names are ``EVENT_NAME_PREFIX`` followed by the notification action
    key. A renderer receives the viewer row and the system display name and
    returns whatever content the feed should show for that row.
    """

    def __init__(self) -> None:
        self._renderers: Dict[str, NotificationRenderer] = {}

    @staticmethod
    def event_name_for(action_key: str) -> str:
        return f"{EVENT_NAME_PREFIX}{action_key}"

    def register(self, action_key: str, renderer: NotificationRenderer) -> None:
        """Register ``renderer`` for ``action_key``, replacing any previous one."""

        event_name = self.event_name_for(action_key)
        if event_name in self._renderers:
            logger.debug("Replacing notification renderer for %s", event_name)
        self._renderers[event_name] = renderer

    def unregister(self, action_key: str) -> None:
        self._renderers.pop(self.event_name_for(action_key), None)

    def renderer(
        self, action_key: str
    ) -> Callable[[NotificationRenderer], NotificationRenderer]:
        """Decorator form of :meth:`register`."""

        def decorator(func: NotificationRenderer) -> NotificationRenderer:
            self.register(action_key, func)
            return func

        return decorator

    def has_renderer(self, event_name: str) -> bool:
        return event_name in self._renderers

    def render(
        self, event_name: str, viewer: NotificationViewer, system_name: str
    ) -> Any:
        """Invoke the renderer registered for ``event_name``.

        Raises ``KeyError`` when nothing is registered; callers check
        :meth:`has_renderer` first.
        """

        return self._renderers[event_name](viewer, system_name)

    def clear(self) -> None:
        self._renderers.clear()


notification_renderer_registry = NotificationRendererRegistry()


__all__ = [
    "EVENT_NAME_PREFIX",
    "NotificationRenderer",
    "NotificationRendererRegistry",
    "notification_renderer_registry",
]
