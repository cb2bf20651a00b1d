"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationStatus(str, Enum):
    """Delivery lifecycle of a notification."""

    PENDING = "pending"
    SENT = "sent"
    READ = "read"
    FAILED = "failed"


class NotificationType(str, Enum):
    """Categories of messages delivered to users."""

    SYSTEM = "system"
    EVENT = "event"
    EVENT_REMINDER = "event_reminder"
    FAVORITE = "favorite"
    ACCOUNT = "account"
    MARKETING = "marketing"


@dataclass
class Notification:
    """Information message delivered to a specific user.

    Apart from the transition to :attr:`NotificationStatus.READ` a notification
    is never modified after it has been stored.
    """

    id: int | None
    user_id: int
    event_type: NotificationType
    title: str
    message: str
    status: NotificationStatus = NotificationStatus.PENDING
    action_url: str | None = None
    action_text: str | None = None
    image_url: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    sent_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def is_unread(self) -> bool:
        """Return ``True`` until the recipient has read the notification."""

        return self.status is not NotificationStatus.READ


__all__ = ["Notification", "NotificationStatus", "NotificationType"]
