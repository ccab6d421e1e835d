"""Paginated views over a user's notifications."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from .notification import NotificationViewer


@dataclass
class NotificationViewerPage:
    """One page of a user's viewer rows, newest first."""

    items: list[NotificationViewer]
    page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        # An empty feed still has a (blank) first page.
        return max(1, math.ceil(self.total_items / self.page_size))

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass
class RenderedFeedPage:
    """A feed page together with the content rendered for each viewer row.

    ``views`` is keyed by the viewer row id as a string and keeps page order.
    Rows without a registered renderer have no entry.
    """

    page: NotificationViewerPage
    views: dict[str, Any] = field(default_factory=dict)


__all__ = ["NotificationViewerPage", "RenderedFeedPage"]
