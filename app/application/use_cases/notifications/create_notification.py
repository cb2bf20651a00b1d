"""Use case for delivering a new notification to a user's inbox."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationStatus, NotificationType
from app.domain.errors import NotificationValidationError
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import now_in_app_timezone

from .validators import collect_notification_errors

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def create_notification(
    session: Session,
    *,
    user_id: int,
    event_type: NotificationType | str,
    title: str,
    message: str,
    action_url: str | None = None,
    action_text: str | None = None,
    image_url: str | None = None,
    payload: dict[str, Any] | None = None,
) -> Notification:
    """Validate and persist a pending notification for ``user_id``."""

    errors = collect_notification_errors(
        title=title, message=message, action_url=action_url, image_url=image_url
    )
    try:
        notification_type = NotificationType(event_type)
    except ValueError:
        errors.append(f"Unknown notification type '{event_type}'")
    if UserRepository(session).get(user_id) is None:
        errors.append("Recipient user does not exist")
    if errors:
        raise NotificationValidationError(errors)

    notification = Notification(
        id=None,
        user_id=user_id,
        event_type=notification_type,
        title=title.strip(),
        message=message.strip(),
        status=NotificationStatus.PENDING,
        action_url=_clean(action_url),
        action_text=_clean(action_text),
        image_url=_clean(image_url),
        payload=dict(payload or {}),
        created_at=now_in_app_timezone(),
    )
    saved = NotificationRepository(session).create(notification)
    logger.info(
        "Created %s notification %s for user %s",
        saved.event_type.value,
        saved.id,
        user_id,
    )
    return saved


__all__ = ["create_notification"]
