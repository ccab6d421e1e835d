"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from notification_hub.config import get_settings
from notification_hub.domain.entities import Actor
from notification_hub.infrastructure.notifications import (
    NotificationRendererRegistry,
    notification_renderer_registry,
)
from notification_hub.infrastructure.security import (
    actor_from_claims,
    decode_access_token,
)

bearer_scheme = HTTPBearer()


def resolve_current_actor(token: str) -> Actor:
    """Resolve the acting user carried by the provided token."""

    try:
        return actor_from_claims(decode_access_token(token))
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def get_current_actor(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> Actor:
    """Return the authenticated actor from the bearer token."""

    return resolve_current_actor(credentials.credentials)


def get_renderer_registry() -> NotificationRendererRegistry:
    """Return the registry used to render notification feeds."""

    return notification_renderer_registry


def get_system_name() -> str:
    """Return the display name handed to notification renderers."""

    return get_settings().system_name


def get_page_size() -> int:
    return get_settings().notifications_page_size
