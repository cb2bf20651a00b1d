from .auth import Token
from .notification import (
    NotificationCreate,
    NotificationPage,
    NotificationRead,
    UnreadCount,
)

__all__ = [
    "NotificationCreate",
    "NotificationPage",
    "NotificationRead",
    "Token",
    "UnreadCount",
]
