"""Use case for exchanging inbox credentials for an identity."""

from __future__ import annotations

import logging
from enum import Enum, auto

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password

logger = logging.getLogger(__name__)


class AuthenticationStatus(Enum):
    """Outcome of a login attempt against the inbox."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


def authenticate_user(
    session: Session, email: str, password: str
) -> tuple[User | None, AuthenticationStatus]:
    """Check ``email`` and ``password`` before a token is issued for the inbox.

    Unknown addresses and wrong passwords both yield
    :attr:`AuthenticationStatus.INVALID_CREDENTIALS` so callers cannot tell
    which accounts exist. A deactivated account with the right password is
    returned together with :attr:`AuthenticationStatus.INACTIVE`, since it may
    not read notifications.
    """

    user = UserRepository(session).get_by_email(email)
    if user is None:
        logger.info("Login rejected for unknown address")
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, user.password):
        logger.info("Login rejected for user %s: wrong password", user.id)
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not user.is_active:
        logger.warning("Login attempt by inactive user %s", user.id)
        return user, AuthenticationStatus.INACTIVE

    return user, AuthenticationStatus.SUCCESS
