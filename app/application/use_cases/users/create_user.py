"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_ADMIN, ROLE_USER, User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import ensure_utc_naive_datetime, now_in_app_timezone

ALLOWED_ROLES = {ROLE_ADMIN, ROLE_USER}


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    normalized_email = email.strip().lower()
    if "@" not in normalized_email:
        raise ValueError("A valid email address is required")
    if not password:
        raise ValueError("Password is required")
    if repository.get_by_email(normalized_email):
        raise ValueError("Email address is already registered")

    role_alias = role.strip().lower()
    if role_alias not in ALLOWED_ROLES:
        raise ValueError(f"Unknown role '{role}'")

    user = User(
        id=None,
        name=name.strip(),
        email=normalized_email,
        password=get_password_hash(password),
        role=role_alias,
        is_active=True,
        created_at=ensure_utc_naive_datetime(now_in_app_timezone()),
    )
    return repository.create(user)
