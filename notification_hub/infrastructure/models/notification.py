"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, Integer, JSON, String
from sqlalchemy.orm import relationship

from notification_hub.infrastructure.database import Base
from notification_hub.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a notification shared by its recipients."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    action_key = Column(String(255), nullable=False)
    icon_key = Column(String(255), nullable=False, default="")
    resource_id = Column(Integer, nullable=True, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    details = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    viewers = relationship(
        "NotificationViewerModel",
        back_populates="notification",
        passive_deletes=True,
    )


__all__ = ["NotificationModel"]
