"""SQLAlchemy model for the per-recipient read state of a notification."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from notification_hub.infrastructure.database import Base


class NotificationViewerModel(Base):
    """One row per (notification, recipient) pair."""

    __tablename__ = "notification_viewer"
    __table_args__ = (
        UniqueConstraint(
            "notification_id", "viewer_id", name="uq_notification_viewer_recipient"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    viewer_id = Column(Integer, nullable=False, index=True)
    status = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )

    notification = relationship(
        "NotificationModel", back_populates="viewers", lazy="joined"
    )


__all__ = ["NotificationViewerModel"]
