"""SQLAlchemy model for follow relations between users and resources."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from notification_hub.infrastructure.database import Base


class FollowerResourceModel(Base):
    """Database representation of a user following a resource."""

    __tablename__ = "notification_follower_resource"
    __table_args__ = (
        UniqueConstraint("follower_id", "hash", name="uq_follower_resource_hash"),
    )

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(Integer, nullable=False, index=True)
    resource_id = Column(Integer, nullable=False)
    resource_class = Column(String(255), nullable=False)
    hash = Column(String(32), nullable=False, index=True)


__all__ = ["FollowerResourceModel"]
