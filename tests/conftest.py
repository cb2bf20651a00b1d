"""Shared fixtures for the test-suite.

The environment is prepared before any ``app`` module is imported because the
settings and the SQLAlchemy engine are created at import time.
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DEFAULT_PAGE_SIZE"] = "20"
os.environ["MAX_PAGE_SIZE"] = "100"
os.environ["APP_TIMEZONE"] = "UTC"

from app.domain.entities import (  # noqa: E402
    Notification,
    NotificationStatus,
    NotificationType,
    User,
)
from app.infrastructure import database  # noqa: E402
from app.infrastructure.repositories import (  # noqa: E402
    NotificationRepository,
    UserRepository,
)
from app.infrastructure.security import get_password_hash  # noqa: E402

DEFAULT_PASSWORD = "Secret123"
BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

_password_hash_cache: dict[str, str] = {}


def _hashed(password: str) -> str:
    if password not in _password_hash_cache:
        _password_hash_cache[password] = get_password_hash(password)
    return _password_hash_cache[password]


@pytest.fixture(autouse=True)
def setup_database():
    """Recreate every table so each test starts from an empty store."""

    from app.infrastructure import models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.engine.dispose()


def pytest_sessionfinish(session, exitstatus):
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def db_session():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_user(db_session):
    """Return a factory storing users with a known password."""

    counter = {"value": 0}

    def _make_user(
        *,
        email: str | None = None,
        role: str = "user",
        is_active: bool = True,
        password: str = DEFAULT_PASSWORD,
    ) -> User:
        counter["value"] += 1
        user = User(
            id=None,
            name=f"User {counter['value']}",
            email=email or f"user{counter['value']}@example.com",
            password=_hashed(password),
            role=role,
            is_active=is_active,
            created_at=None,
        )
        return UserRepository(db_session).create(user)

    return _make_user


@pytest.fixture()
def make_notification(db_session):
    """Return a factory storing notifications at controlled timestamps."""

    def _make_notification(
        user_id: int,
        *,
        minutes: int = 0,
        status: NotificationStatus = NotificationStatus.SENT,
        title: str = "Event update",
    ) -> Notification:
        notification = Notification(
            id=None,
            user_id=user_id,
            event_type=NotificationType.EVENT,
            title=title,
            message="Something changed in an event you follow.",
            status=status,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        return NotificationRepository(db_session).create(notification)

    return _make_notification


@pytest.fixture()
def inbox(make_user, make_notification):
    """A user with 25 notifications, the 10 most recent of them unread."""

    user = make_user()
    for minute in range(25):
        status = NotificationStatus.SENT if minute >= 15 else NotificationStatus.READ
        make_notification(user.id, minutes=minute, status=status, title=f"Item {minute}")
    return user
