"""Domain entity linking a user to a resource they follow."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FollowerResource:
    """Interest of ``follower_id`` in the resource ``resource_class``/``resource_id``."""

    id: int | None
    follower_id: int
    resource_id: int
    resource_class: str
    hash: str


__all__ = ["FollowerResource"]
