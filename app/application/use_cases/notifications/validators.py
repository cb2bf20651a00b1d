"""Validation rules applied before a notification is stored."""

from __future__ import annotations

from urllib.parse import urlparse

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 1000


def collect_notification_errors(
    *,
    title: str | None,
    message: str | None,
    action_url: str | None,
    image_url: str | None,
) -> list[str]:
    """Return every rule broken by the given fields; empty when valid."""

    errors: list[str] = []
    clean_title = (title or "").strip()
    clean_message = (message or "").strip()

    if len(clean_title) < TITLE_MIN_LENGTH:
        errors.append(f"Title must be at least {TITLE_MIN_LENGTH} characters long")
    if len(clean_title) > TITLE_MAX_LENGTH:
        errors.append(f"Title cannot exceed {TITLE_MAX_LENGTH} characters")
    if not clean_message:
        errors.append("Message is required")
    if len(clean_message) > MESSAGE_MAX_LENGTH:
        errors.append(f"Message cannot exceed {MESSAGE_MAX_LENGTH} characters")
    if action_url and any(char.isspace() for char in action_url.strip()):
        errors.append("Action URL format is invalid")
    if image_url and not _is_absolute_http_url(image_url.strip()):
        errors.append("Image URL format is invalid")
    return errors


def _is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


__all__ = ["collect_notification_errors"]
