"""Token helpers used to identify the acting user."""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from notification_hub.config import get_settings
from notification_hub.domain.entities import Actor


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode(
        {**data, "exp": expire}, settings.secret_key, algorithm=settings.jwt_algorithm
    )


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def create_actor_token(actor: Actor, expires_delta: timedelta | None = None) -> str:
    """Issue a token carrying ``actor`` and its display fields."""

    claims: dict[str, Any] = {
        "sub": str(actor.id),
        "first_name": actor.first_name,
        "last_name": actor.last_name,
        "avatar": actor.avatar,
        "public_url": actor.public_url,
    }
    return create_access_token(claims, expires_delta)


def actor_from_claims(claims: dict[str, Any]) -> Actor:
    """Build an :class:`Actor` from decoded token claims."""

    subject = claims.get("sub")
    try:
        actor_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise ValueError("Token subject is not a user id") from exc
    return Actor(
        id=actor_id,
        first_name=claims.get("first_name") or "",
        last_name=claims.get("last_name") or "",
        avatar=claims.get("avatar"),
        public_url=claims.get("public_url"),
    )


__all__ = [
    "actor_from_claims",
    "create_access_token",
    "create_actor_token",
    "decode_access_token",
]
