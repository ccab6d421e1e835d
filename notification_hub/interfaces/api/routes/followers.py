"""Rutas para seguir y dejar de seguir recursos."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from notification_hub.application.use_cases.followers import (
    follow_resource as follow_resource_uc,
    get_follower_resource as get_follower_resource_uc,
    list_resource_followers as list_resource_followers_uc,
    unfollow_resource as unfollow_resource_uc,
)
from notification_hub.domain.entities import Actor, FollowerResource
from notification_hub.infrastructure.database import get_db
from notification_hub.interfaces.api.dependencies import get_current_actor
from notification_hub.interfaces.api.schemas import (
    FollowerResourceRead,
    FollowRequest,
    ResourceFollowersRead,
)

router = APIRouter(prefix="/followers", tags=["followers"])


def _to_read_model(relation: FollowerResource) -> FollowerResourceRead:
    return FollowerResourceRead.model_validate(relation)


@router.post("/", response_model=FollowerResourceRead, status_code=status.HTTP_201_CREATED)
def follow_resource(
    payload: FollowRequest,
    db: Session = Depends(get_db),
    current_actor: Actor = Depends(get_current_actor),
) -> FollowerResourceRead:
    """Suscribe al usuario autenticado a las notificaciones de un recurso."""

    relation = follow_resource_uc(
        db, current_actor.id, payload.resource_id, payload.resource_class
    )
    return _to_read_model(relation)


@router.get("/{resource_class}/{resource_id}", response_model=FollowerResourceRead)
def read_follower_resource(
    resource_class: str,
    resource_id: int,
    db: Session = Depends(get_db),
    current_actor: Actor = Depends(get_current_actor),
) -> FollowerResourceRead:
    """Devuelve la suscripción del usuario autenticado al recurso."""

    relation = get_follower_resource_uc(db, current_actor.id, resource_id, resource_class)
    if relation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Suscripción no encontrada"
        )
    return _to_read_model(relation)


@router.delete("/{resource_class}/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
def unfollow_resource(
    resource_class: str,
    resource_id: int,
    db: Session = Depends(get_db),
    current_actor: Actor = Depends(get_current_actor),
) -> Response:
    """Cancela la suscripción; no falla si el usuario no seguía el recurso."""

    unfollow_resource_uc(db, current_actor.id, resource_id, resource_class)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{resource_class}/{resource_id}/users", response_model=ResourceFollowersRead
)
def list_resource_followers(
    resource_class: str,
    resource_id: int,
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> ResourceFollowersRead:
    """Lista los usuarios que siguen el recurso."""

    follower_ids = list_resource_followers_uc(db, resource_id, resource_class)
    return ResourceFollowersRead(
        resource_id=resource_id,
        resource_class=resource_class,
        follower_ids=sorted(follower_ids),
    )
