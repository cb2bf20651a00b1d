"""Use case for resolving the user that owns an inbox."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.errors import Unauthorized
from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def get_active_user(session: Session, user_id: int | None) -> User:
    """Return the active user identified by ``user_id`` or raise :class:`Unauthorized`."""

    if user_id is None:
        raise Unauthorized("Missing user identity")

    user = UserRepository(session).get(user_id)
    if user is None:
        logger.warning("Rejected request for unknown user %s", user_id)
        raise Unauthorized("Unknown user")
    if not user.is_active:
        logger.warning("Rejected request for inactive user %s", user_id)
        raise Unauthorized("Inactive user")
    return user
