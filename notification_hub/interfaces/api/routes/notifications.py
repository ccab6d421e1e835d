"""Rutas para crear, listar y marcar notificaciones."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from notification_hub.application.use_cases.notifications import (
    NotificationPageNotFoundError,
    count_unviewed_notifications as count_unviewed_notifications_uc,
    create_notification_and_notify as create_notification_and_notify_uc,
    mark_notifications_as_viewed as mark_notifications_as_viewed_uc,
    render_user_feed_page as render_user_feed_page_uc,
)
from notification_hub.domain.entities import (
    Actor,
    Notifiable,
    NotifiableResource,
    Notification,
)
from notification_hub.infrastructure.database import get_db
from notification_hub.infrastructure.notifications import NotificationRendererRegistry
from notification_hub.interfaces.api.dependencies import (
    get_current_actor,
    get_page_size,
    get_renderer_registry,
    get_system_name,
)
from notification_hub.interfaces.api.schemas import (
    NotificationCreate,
    NotificationFeedRead,
    NotificationMarkViewedRequest,
    NotificationRead,
    NotificationViewerRead,
    UnviewedCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.post(
    "/",
    response_model=NotificationRead | None,
    status_code=status.HTTP_201_CREATED,
)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    current_actor: Actor = Depends(get_current_actor),
) -> NotificationRead | None:
    """Crea una notificación y la entrega a los usuarios interesados.

    Devuelve ``null`` cuando ningún usuario debe recibirla.
    """

    resource = None
    if payload.resource is not None:
        resource = NotifiableResource(
            id=payload.resource.id, class_name=payload.resource.class_name
        )
    notifiable = Notifiable(
        action_key=payload.action_key,
        icon_key=payload.icon_key,
        resource=resource,
        send_to_followers=payload.send_to_followers,
        include_user_ids=payload.include_user_ids,
        exclude_user_ids=payload.exclude_user_ids,
        doer=current_actor,
        notification_details=payload.details,
    )
    notification = create_notification_and_notify_uc(db, notifiable)
    if notification is None:
        return None
    return _notification_to_schema(notification)


@router.get("/", response_model=NotificationFeedRead)
def list_notifications(
    page: int = Query(1, description="Número de página, comenzando en 1"),
    page_size: int | None = Query(None, ge=1, le=100),
    db: Session = Depends(get_db),
    current_actor: Actor = Depends(get_current_actor),
    registry: NotificationRendererRegistry = Depends(get_renderer_registry),
    system_name: str = Depends(get_system_name),
    default_page_size: int = Depends(get_page_size),
) -> NotificationFeedRead:
    """Devuelve una página de notificaciones del usuario y las marca como vistas."""

    try:
        rendered = render_user_feed_page_uc(
            db,
            current_actor.id,
            page=page,
            page_size=page_size or default_page_size,
            registry=registry,
            system_name=system_name,
        )
    except NotificationPageNotFoundError as exc:
        logger.info(
            "Página de notificaciones %s fuera de rango para el usuario %s",
            page,
            current_actor.id,
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Página no encontrada"
        ) from exc

    feed_page = rendered.page
    return NotificationFeedRead(
        page=feed_page.page,
        page_size=feed_page.page_size,
        total_items=feed_page.total_items,
        total_pages=feed_page.total_pages,
        has_previous=feed_page.has_previous,
        has_next=feed_page.has_next,
        items=[NotificationViewerRead.model_validate(item) for item in feed_page.items],
        views=rendered.views,
    )


@router.get("/unviewed/count", response_model=UnviewedCountRead)
def count_unviewed(
    db: Session = Depends(get_db),
    current_actor: Actor = Depends(get_current_actor),
) -> UnviewedCountRead:
    """Cuenta las notificaciones pendientes de lectura del usuario autenticado."""

    try:
        total = count_unviewed_notifications_uc(db, current_actor=current_actor)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UnviewedCountRead(total=total)


@router.post("/viewed", status_code=status.HTTP_204_NO_CONTENT)
def mark_as_viewed(
    payload: NotificationMarkViewedRequest,
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> Response:
    """Marca como vistas las filas de lectura indicadas."""

    mark_notifications_as_viewed_uc(db, payload.unique_ids())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
