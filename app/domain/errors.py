"""Exceptions raised by the domain and application layers."""

from __future__ import annotations


class NotificationInboxError(Exception):
    """Base class for errors surfaced to API callers."""


class Unauthorized(NotificationInboxError):
    """The caller identity is missing, invalid or no longer active."""


class StorageUnavailable(NotificationInboxError):
    """The notification store could not be reached."""


class InvalidState(NotificationInboxError):
    """The requested filter combination cannot be satisfied."""


class NotificationNotFound(NotificationInboxError, LookupError):
    """The notification does not exist or belongs to another user."""


class NotificationValidationError(NotificationInboxError, ValueError):
    """A notification payload broke one or more validation rules."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


__all__ = [
    "InvalidState",
    "NotificationInboxError",
    "NotificationNotFound",
    "NotificationValidationError",
    "StorageUnavailable",
    "Unauthorized",
]
