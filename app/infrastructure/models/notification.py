"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, JSON, String, Text

from app.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        # Serves the inbox listing: owner filter plus newest-first ordering.
        Index("ix_notification_user_created", "user_id", "created_at", "id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    event_type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)
    action_url = Column(String(500), nullable=True)
    action_text = Column(String(100), nullable=True)
    image_url = Column(String(500), nullable=True)
    payload = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False)
    sent_at = Column(DateTime(), nullable=True)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
