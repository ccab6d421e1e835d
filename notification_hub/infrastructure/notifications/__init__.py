"""Rendering helpers for notifications in the infrastructure layer."""

from .renderers import (
    EVENT_NAME_PREFIX,
    NotificationRenderer,
    NotificationRendererRegistry,
    notification_renderer_registry,
)

__all__ = [
    "EVENT_NAME_PREFIX",
    "NotificationRenderer",
    "NotificationRendererRegistry",
    "notification_renderer_registry",
]
