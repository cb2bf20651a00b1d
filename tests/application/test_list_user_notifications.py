"""Tests for reading a page of the notification inbox."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from sqlalchemy.exc import OperationalError

from app.application.use_cases.notifications import list_user_notifications
from app.config import get_settings
from app.domain.entities import Notification, NotificationStatus, NotificationType
from app.domain.errors import StorageUnavailable, Unauthorized
from app.infrastructure.repositories import NotificationRepository


def test_first_page_of_a_larger_inbox(db_session, inbox):
    result = list_user_notifications(
        db_session, user_id=inbox.id, page=1, page_size=20, unread_only=False
    )

    assert len(result.items) == 20
    assert result.total_count == 25
    assert result.total_pages == 2
    assert result.has_next_page is True


def test_last_page_holds_the_remainder(db_session, inbox):
    result = list_user_notifications(
        db_session, user_id=inbox.id, page=2, page_size=20, unread_only=False
    )

    assert len(result.items) == 5
    assert result.total_count == 25
    assert result.total_pages == 2
    assert result.has_next_page is False


def test_unread_only_returns_the_unread_subset(db_session, inbox):
    unread = list_user_notifications(
        db_session, user_id=inbox.id, page=1, page_size=20, unread_only=True
    )
    everything = list_user_notifications(
        db_session, user_id=inbox.id, page=1, page_size=20, unread_only=False
    )

    assert len(unread.items) == 10
    assert unread.total_count == 10
    assert unread.total_pages == 1
    assert all(item.is_unread for item in unread.items)
    assert {item.id for item in unread.items} <= {item.id for item in everything.items}


def test_invalid_pagination_falls_back_to_defaults(db_session, inbox):
    result = list_user_notifications(
        db_session, user_id=inbox.id, page=0, page_size=0, unread_only=False
    )

    assert result.page == 1
    assert result.page_size == get_settings().default_page_size
    assert len(result.items) == 20


def test_oversized_pages_are_capped(db_session, inbox):
    result = list_user_notifications(db_session, user_id=inbox.id, page_size=5000)

    assert result.page_size == get_settings().max_page_size
    assert len(result.items) == 25


def test_page_past_the_end_is_empty_but_keeps_the_total(db_session, inbox):
    result = list_user_notifications(
        db_session, user_id=inbox.id, page=9, page_size=20
    )

    assert result.items == ()
    assert result.total_count == 25
    assert result.total_pages == 2


def test_items_are_newest_first_with_id_tie_break(db_session, make_user, make_notification):
    user = make_user()
    for minute in (5, 1, 5, 3, 5, 1):
        make_notification(user.id, minutes=minute)

    result = list_user_notifications(db_session, user_id=user.id, page_size=50)
    keys = [(item.created_at, item.id) for item in result.items]

    assert keys == sorted(keys, reverse=True)
    assert [item.created_at.minute for item in result.items] == [5, 5, 5, 3, 1, 1]


def test_pages_do_not_overlap(db_session, inbox):
    seen: list[int] = []
    for page in range(1, 5):
        result = list_user_notifications(db_session, user_id=inbox.id, page=page, page_size=7)
        seen.extend(item.id for item in result.items)

    assert len(seen) == 25
    assert len(set(seen)) == 25


def test_other_users_notifications_are_never_listed(db_session, inbox, make_user, make_notification):
    stranger = make_user()
    make_notification(stranger.id, minutes=100)

    result = list_user_notifications(db_session, user_id=inbox.id, page_size=100)

    assert result.total_count == 25
    assert all(item.user_id == inbox.id for item in result.items)


def test_pending_notifications_count_as_unread(db_session, make_user, make_notification):
    user = make_user()
    make_notification(user.id, status=NotificationStatus.PENDING)
    make_notification(user.id, status=NotificationStatus.FAILED)
    make_notification(user.id, status=NotificationStatus.READ)

    result = list_user_notifications(db_session, user_id=user.id, unread_only=True)

    assert result.total_count == 2


def test_empty_inbox(db_session, make_user):
    user = make_user()

    result = list_user_notifications(db_session, user_id=user.id)

    assert result.items == ()
    assert result.total_count == 0
    assert result.total_pages == 0
    assert result.has_next_page is False


@pytest.mark.parametrize("user_id", [None, 9999])
def test_missing_or_unknown_user_is_unauthorized(db_session, user_id):
    with pytest.raises(Unauthorized):
        list_user_notifications(db_session, user_id=user_id)


def test_inactive_user_is_unauthorized(db_session, make_user):
    user = make_user(is_active=False)

    with pytest.raises(Unauthorized):
        list_user_notifications(db_session, user_id=user.id)


def test_storage_failures_propagate_as_storage_unavailable(db_session, make_user, monkeypatch):
    user = make_user()

    def _broken_count(self):
        raise OperationalError("SELECT count(*)", {}, Exception("database is down"))

    monkeypatch.setattr("sqlalchemy.orm.Query.count", _broken_count)

    with pytest.raises(StorageUnavailable) as excinfo:
        list_user_notifications(db_session, user_id=user.id)

    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_ordering_follows_real_instants_across_daylight_saving(
    db_session, make_user, monkeypatch
):
    monkeypatch.setattr(
        "app.utils.datetime.get_app_timezone", lambda: ZoneInfo("Europe/Paris")
    )
    user = make_user()
    repository = NotificationRepository(db_session)
    # Local wall clock reads 02:50 then 02:10: the second one happened later.
    for title, instant in (
        ("earlier", datetime(2025, 10, 26, 0, 50, tzinfo=timezone.utc)),
        ("later", datetime(2025, 10, 26, 1, 10, tzinfo=timezone.utc)),
    ):
        repository.create(
            Notification(
                id=None,
                user_id=user.id,
                event_type=NotificationType.SYSTEM,
                title=title,
                message="Clocks went back tonight.",
                created_at=instant,
            )
        )

    result = list_user_notifications(db_session, user_id=user.id)

    assert [item.title for item in result.items] == ["later", "earlier"]
    assert result.items[0].created_at == datetime(2025, 10, 26, 1, 10, tzinfo=timezone.utc)
