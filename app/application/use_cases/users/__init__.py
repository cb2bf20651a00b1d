"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .get_user import get_active_user

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "get_active_user",
]
