"""Use cases for reading and managing user notifications."""

from .count_unread_notifications import count_unread_notifications
from .create_notification import create_notification
from .list_user_notifications import list_user_notifications
from .mark_notification_as_read import mark_notification_as_read

__all__ = [
    "count_unread_notifications",
    "create_notification",
    "list_user_notifications",
    "mark_notification_as_read",
]
