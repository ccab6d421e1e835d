"""Stable keys identifying followed resources."""

from __future__ import annotations

from hashlib import md5


def get_resource_hash(resource_id: int, resource_class: str) -> str:
    """Return the follow-relation key for ``resource_id`` of ``resource_class``.

    The key is the md5 hex digest of ``"<resource_class>_<resource_id>"``.
    Relations are written and looked up through this function only, so both
    paths always agree on the encoding.
    """

    raw = f"{resource_class}_{resource_id}"
    return md5(raw.encode("utf-8")).hexdigest()


__all__ = ["get_resource_hash"]
