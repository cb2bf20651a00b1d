"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import NotificationStatus, NotificationType


class NotificationCreate(BaseModel):
    """Payload used by administrators to deliver a notification."""

    user_id: int = Field(..., description="Recipient of the notification")
    event_type: NotificationType = NotificationType.SYSTEM
    title: str
    message: str
    action_url: str | None = None
    action_text: str | None = None
    image_url: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    event_type: NotificationType
    title: str
    message: str
    status: NotificationStatus
    is_unread: bool
    action_url: str | None = None
    action_text: str | None = None
    image_url: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    sent_at: datetime | None = None
    read_at: datetime | None = None


class NotificationPage(BaseModel):
    """One page of the inbox together with pagination metadata."""

    items: list[NotificationRead]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool


class UnreadCount(BaseModel):
    unread_count: int


__all__ = ["NotificationCreate", "NotificationPage", "NotificationRead", "UnreadCount"]
