"""Tests for the notification write use cases and the unread counter."""

import pytest

from app.application.use_cases.notifications import (
    count_unread_notifications,
    create_notification,
    list_user_notifications,
    mark_notification_as_read,
)
from app.domain.entities import NotificationStatus, NotificationType
from app.domain.errors import NotificationNotFound, NotificationValidationError, Unauthorized
from app.infrastructure.repositories import NotificationRepository


def test_mark_as_read_moves_the_notification_out_of_the_unread_list(
    db_session, make_user, make_notification
):
    user = make_user()
    notification = make_notification(user.id, status=NotificationStatus.SENT)

    mark_notification_as_read(db_session, user_id=user.id, notification_id=notification.id)

    stored = NotificationRepository(db_session).get_for_user(notification.id, user_id=user.id)
    assert stored.status is NotificationStatus.READ
    assert stored.read_at is not None
    assert list_user_notifications(db_session, user_id=user.id, unread_only=True).total_count == 0


def test_mark_as_read_is_idempotent(db_session, make_user, make_notification):
    user = make_user()
    notification = make_notification(user.id)
    repository = NotificationRepository(db_session)

    mark_notification_as_read(db_session, user_id=user.id, notification_id=notification.id)
    first_read_at = repository.get_for_user(notification.id, user_id=user.id).read_at
    mark_notification_as_read(db_session, user_id=user.id, notification_id=notification.id)

    assert repository.get_for_user(notification.id, user_id=user.id).read_at == first_read_at


def test_cannot_mark_someone_elses_notification(db_session, make_user, make_notification):
    owner = make_user()
    intruder = make_user()
    notification = make_notification(owner.id)

    with pytest.raises(NotificationNotFound):
        mark_notification_as_read(
            db_session, user_id=intruder.id, notification_id=notification.id
        )

    stored = NotificationRepository(db_session).get_for_user(notification.id, user_id=owner.id)
    assert stored.is_unread


def test_mark_missing_notification(db_session, make_user):
    user = make_user()

    with pytest.raises(NotificationNotFound):
        mark_notification_as_read(db_session, user_id=user.id, notification_id=404)


@pytest.mark.parametrize("notification_id", [0, -1, 99999999999999999999])
def test_mark_out_of_range_id_is_not_found(db_session, make_user, notification_id):
    user = make_user()

    with pytest.raises(NotificationNotFound):
        mark_notification_as_read(
            db_session, user_id=user.id, notification_id=notification_id
        )


def test_count_unread(db_session, inbox):
    assert count_unread_notifications(db_session, user_id=inbox.id) == 10


def test_count_unread_requires_identity(db_session):
    with pytest.raises(Unauthorized):
        count_unread_notifications(db_session, user_id=None)


def test_create_notification_stores_a_pending_entry(db_session, make_user):
    user = make_user()

    created = create_notification(
        db_session,
        user_id=user.id,
        event_type="event_reminder",
        title="  Garage sale tomorrow  ",
        message="Don't forget the sale on Main Street.",
        action_url="/events/12",
        image_url="https://cdn.example.com/sale.png",
        payload={"event_id": 12},
    )

    assert created.id is not None
    assert created.status is NotificationStatus.PENDING
    assert created.event_type is NotificationType.EVENT_REMINDER
    assert created.title == "Garage sale tomorrow"
    assert created.payload == {"event_id": 12}
    assert created.created_at is not None


def test_create_notification_reports_every_broken_rule(db_session):
    with pytest.raises(NotificationValidationError) as excinfo:
        create_notification(
            db_session,
            user_id=12345,
            event_type="carrier_pigeon",
            title="Hi",
            message="   ",
            image_url="not-a-url",
        )

    errors = excinfo.value.errors
    assert any("Title" in error for error in errors)
    assert "Message is required" in errors
    assert "Image URL format is invalid" in errors
    assert any("carrier_pigeon" in error for error in errors)
    assert "Recipient user does not exist" in errors


def test_create_notification_rejects_long_fields(db_session, make_user):
    user = make_user()

    with pytest.raises(NotificationValidationError) as excinfo:
        create_notification(
            db_session,
            user_id=user.id,
            event_type=NotificationType.SYSTEM,
            title="x" * 201,
            message="y" * 1001,
        )

    assert len(excinfo.value.errors) == 2
