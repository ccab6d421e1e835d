"""Utility helpers for reusable functionality."""

from .colors import ColorChooser
from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)
from .hashing import get_resource_hash

__all__ = [
    "ColorChooser",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "get_resource_hash",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
