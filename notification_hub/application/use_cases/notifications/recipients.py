"""Computation of the users who should receive a notification."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notification_hub.application.use_cases.followers import list_resource_followers
from notification_hub.domain.entities import Notifiable


def resolve_recipients(session: Session, notifiable: Notifiable) -> set[int]:
    """Return the ids of the users to notify about ``notifiable``.

    Followers of the resource (when requested) and the explicitly included
    users are merged, then the excluded users are removed. The doer is
    removed last, so an actor is never notified of its own action.
    """

    user_ids: set[int] = set()
    resource = notifiable.resource
    if notifiable.send_to_followers and resource is not None:
        user_ids |= list_resource_followers(session, resource.id, resource.class_name)

    user_ids.update(notifiable.include_user_ids or ())
    user_ids.difference_update(notifiable.exclude_user_ids or ())

    doer = notifiable.doer
    if doer is not None:
        user_ids.discard(doer.id)

    return user_ids


__all__ = ["resolve_recipients"]
