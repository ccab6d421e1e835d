"""Persistence helpers for follow relations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notification_hub.domain.entities import FollowerResource
from notification_hub.infrastructure.models import FollowerResourceModel


class FollowerResourceRepository:
    """Provide CRUD operations for :class:`FollowerResource` relations."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_follower_and_hash(
        self, follower_id: int, resource_hash: str
    ) -> FollowerResource | None:
        model = self._get_model(follower_id=follower_id, hash=resource_hash)
        return self._to_entity(model) if model else None

    def list_by_hash(self, resource_hash: str) -> Sequence[FollowerResource]:
        query = (
            self.session.query(FollowerResourceModel)
            .filter(FollowerResourceModel.hash == resource_hash)
            .order_by(FollowerResourceModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_follower_ids(self, resource_hash: str) -> set[int]:
        query = (
            self.session.query(FollowerResourceModel.follower_id)
            .filter(FollowerResourceModel.hash == resource_hash)
            .distinct()
        )
        return {follower_id for (follower_id,) in query.all()}

    def create(self, relation: FollowerResource) -> FollowerResource:
        model = FollowerResourceModel(
            follower_id=relation.follower_id,
            resource_id=relation.resource_id,
            resource_class=relation.resource_class,
            hash=relation.hash,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, relation_id: int) -> bool:
        model = self._get_model(id=relation_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, **filters) -> FollowerResourceModel | None:
        return self.session.query(FollowerResourceModel).filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: FollowerResourceModel) -> FollowerResource:
        return FollowerResource(
            id=model.id,
            follower_id=model.follower_id,
            resource_id=model.resource_id,
            resource_class=model.resource_class,
            hash=model.hash,
        )


__all__ = ["FollowerResourceRepository"]
