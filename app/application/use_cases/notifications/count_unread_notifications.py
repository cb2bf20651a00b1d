"""Use case for the unread notifications badge."""

from sqlalchemy.orm import Session

from app.application.use_cases.users import get_active_user
from app.infrastructure.repositories import NotificationRepository


def count_unread_notifications(session: Session, *, user_id: int | None) -> int:
    """Return how many notifications ``user_id`` has not read yet."""

    user = get_active_user(session, user_id)
    return NotificationRepository(session).count_unread(user.id)


__all__ = ["count_unread_notifications"]
