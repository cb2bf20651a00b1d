"""FastAPI dependency utilities."""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.application.use_cases.users import get_active_user
from app.domain.entities import User
from app.domain.errors import StorageUnavailable, Unauthorized
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

logger = logging.getLogger(__name__)


def unauthorized_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def storage_unavailable_exception(exc: StorageUnavailable) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=str(exc),
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token.

    Raises :class:`Unauthorized` when the token is malformed, expired or
    points to an unknown or inactive account.
    """

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise Unauthorized("Invalid credentials") from exc

    email = payload.get("sub")
    if not isinstance(email, str) or not email:
        raise Unauthorized("Invalid credentials")

    user = UserRepository(db).get_by_email(email)
    if user is None:
        logger.warning("Token presented for unknown account %s", email)
        raise Unauthorized("User not found")
    return get_active_user(db, user.id)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    try:
        return resolve_current_user(token, db)
    except Unauthorized as exc:
        raise unauthorized_exception(str(exc)) from exc
    except StorageUnavailable as exc:
        raise storage_unavailable_exception(exc) from exc


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_user
