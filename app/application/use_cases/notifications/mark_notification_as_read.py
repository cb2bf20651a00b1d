"""Use case for acknowledging a notification."""

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.users import get_active_user
from app.domain.errors import NotificationNotFound
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def mark_notification_as_read(
    session: Session, *, user_id: int | None, notification_id: int
) -> None:
    """Mark one of the user's notifications as read.

    Repeating the call is harmless. Notifications owned by someone else are
    reported as missing.
    """

    user = get_active_user(session, user_id)
    if not NotificationRepository(session).mark_as_read(
        notification_id, user_id=user.id
    ):
        raise NotificationNotFound(f"Notification {notification_id} not found")
    logger.info("User %s read notification %s", user.id, notification_id)


__all__ = ["mark_notification_as_read"]
