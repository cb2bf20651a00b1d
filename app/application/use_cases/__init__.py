"""Aggregate application use cases."""

from .notifications import (
    count_unread_notifications,
    create_notification,
    list_user_notifications,
    mark_notification_as_read,
)
from .users import authenticate_user, create_user, get_active_user

__all__ = [
    "authenticate_user",
    "count_unread_notifications",
    "create_notification",
    "create_user",
    "get_active_user",
    "list_user_notifications",
    "mark_notification_as_read",
]
