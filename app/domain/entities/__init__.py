"""Domain entities exposed by the application."""

from .notification import Notification, NotificationStatus, NotificationType
from .pagination import PageRequest, PaginatedResult
from .user import ROLE_ADMIN, ROLE_USER, User

__all__ = [
    "Notification",
    "NotificationStatus",
    "NotificationType",
    "PageRequest",
    "PaginatedResult",
    "ROLE_ADMIN",
    "ROLE_USER",
    "User",
]
