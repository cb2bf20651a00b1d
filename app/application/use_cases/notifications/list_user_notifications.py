"""Use case for reading one page of a user's notification inbox."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.users import get_active_user
from app.config import Settings, get_settings
from app.domain.entities import Notification, PageRequest, PaginatedResult
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def list_user_notifications(
    session: Session,
    *,
    user_id: int | None,
    page: int | None = 1,
    page_size: int | None = None,
    unread_only: bool = False,
    settings: Settings | None = None,
) -> PaginatedResult[Notification]:
    """Return the requested page of notifications owned by ``user_id``.

    Out of range pagination values are clamped rather than rejected: ``page``
    below one reads the first page and ``page_size`` is forced into
    ``[1, MAX_PAGE_SIZE]`` (values below one fall back to
    ``DEFAULT_PAGE_SIZE``). A page past the end is returned empty.

    Raises :class:`~app.domain.errors.Unauthorized` when ``user_id`` does not
    resolve to an active user and
    :class:`~app.domain.errors.StorageUnavailable` when the store cannot be
    reached. Nothing is retried here.
    """

    settings = settings or get_settings()
    user = get_active_user(session, user_id)

    request = PageRequest.normalize(
        page,
        page_size,
        unread_only,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    logger.debug(
        "Listing notifications for user %s: page=%s page_size=%s unread_only=%s",
        user.id,
        request.page,
        request.page_size,
        request.unread_only,
    )

    items, total_count = NotificationRepository(session).query_notifications(
        user.id,
        unread_only=request.unread_only,
        offset=request.offset,
        limit=request.page_size,
    )
    return PaginatedResult.create(items, total_count, request)


__all__ = ["list_user_notifications"]
