"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationStatus, NotificationType
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_utc_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .errors import storage_errors

# Primary keys are signed 64-bit integers; larger ids can never match a row.
MAX_NOTIFICATION_ID = 2**63 - 1


def _is_storable_id(notification_id: int) -> bool:
    return 1 <= notification_id <= MAX_NOTIFICATION_ID


class NotificationRepository:
    """Provide read and write operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def query_notifications(
        self,
        user_id: int,
        *,
        unread_only: bool = False,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[Sequence[Notification], int]:
        """Return one slice of the user's inbox and the number of matching rows.

        Rows are ordered newest first with ties broken by descending id. The
        count and the slice are read with two statements and no shared
        snapshot, so concurrent inserts may make them disagree slightly.
        """

        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(
                NotificationModel.status != NotificationStatus.READ.value
            )

        with storage_errors(self.session, "list notifications"):
            total_count = query.count()
            if offset >= total_count:
                return [], total_count
            models = (
                query.order_by(
                    NotificationModel.created_at.desc(), NotificationModel.id.desc()
                )
                .offset(offset)
                .limit(limit)
                .all()
            )
        return [self._to_entity(model) for model in models], total_count

    def count_unread(self, user_id: int) -> int:
        with storage_errors(self.session, "count unread notifications"):
            return (
                self.session.query(NotificationModel)
                .filter(NotificationModel.user_id == user_id)
                .filter(NotificationModel.status != NotificationStatus.READ.value)
                .count()
            )

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        if not _is_storable_id(notification_id):
            return None
        with storage_errors(self.session, "load notification"):
            model = (
                self.session.query(NotificationModel)
                .filter(NotificationModel.id == notification_id)
                .filter(NotificationModel.user_id == user_id)
                .first()
            )
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        with storage_errors(self.session, "create notification"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> bool:
        """Flag the notification as read.

        Returns ``False`` when the notification does not belong to ``user_id``.
        Already read notifications keep the ``read_at`` of their first read.
        """

        if not _is_storable_id(notification_id):
            return False
        with storage_errors(self.session, "mark notification as read"):
            model = (
                self.session.query(NotificationModel)
                .filter(NotificationModel.id == notification_id)
                .filter(NotificationModel.user_id == user_id)
                .first()
            )
            if model is None:
                return False
            if model.status == NotificationStatus.READ.value:
                return True
            model.status = NotificationStatus.READ.value
            model.read_at = ensure_utc_naive_datetime(now_in_app_timezone())
            self.session.add(model)
            self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.created_at = (
            ensure_utc_naive_datetime(notification.created_at)
            or ensure_utc_naive_datetime(now_in_app_timezone())
        )
        model.user_id = notification.user_id
        model.event_type = NotificationType(notification.event_type).value
        model.title = notification.title
        model.message = notification.message
        model.status = NotificationStatus(notification.status).value
        model.action_url = notification.action_url
        model.action_text = notification.action_text
        model.image_url = notification.image_url
        model.payload = notification.payload or {}
        model.sent_at = ensure_utc_naive_datetime(notification.sent_at)
        model.read_at = ensure_utc_naive_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            event_type=NotificationType(model.event_type),
            title=model.title,
            message=model.message,
            status=NotificationStatus(model.status),
            action_url=model.action_url,
            action_text=model.action_text,
            image_url=model.image_url,
            payload=model.payload or {},
            created_at=ensure_app_timezone(model.created_at),
            sent_at=ensure_app_timezone(model.sent_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
