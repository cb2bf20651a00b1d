"""Endpoints for reading and managing the authenticated user's notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications as count_unread_notifications_uc,
    create_notification as create_notification_uc,
    list_user_notifications as list_user_notifications_uc,
    mark_notification_as_read as mark_notification_as_read_uc,
)
from app.domain.entities import Notification, PaginatedResult, User
from app.domain.errors import (
    NotificationNotFound,
    NotificationValidationError,
    StorageUnavailable,
    Unauthorized,
)
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import (
    get_current_user,
    require_admin,
    storage_unavailable_exception,
    unauthorized_exception,
)
from app.interfaces.api.schemas import (
    NotificationCreate,
    NotificationPage,
    NotificationRead,
    UnreadCount,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _optional_int(value: str | None) -> int | None:
    """Read a pagination value; anything that is not an integer counts as missing."""

    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _page_to_schema(result: PaginatedResult[Notification]) -> NotificationPage:
    return NotificationPage(
        items=[_notification_to_schema(item) for item in result.items],
        page=result.page,
        page_size=result.page_size,
        total_count=result.total_count,
        total_pages=result.total_pages,
        has_previous_page=result.has_previous_page,
        has_next_page=result.has_next_page,
    )


@router.get("/", response_model=NotificationPage)
def list_notifications(
    page: str | None = None,
    page_size: str | None = None,
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationPage:
    """Return one page of the authenticated user's notifications, newest first.

    Malformed ``page`` or ``page_size`` values are treated like out-of-range
    ones and fall back to the first page and the default page size.
    """

    try:
        result = list_user_notifications_uc(
            db,
            user_id=current_user.id,
            page=_optional_int(page),
            page_size=_optional_int(page_size),
            unread_only=unread_only,
        )
    except Unauthorized as exc:
        raise unauthorized_exception(str(exc)) from exc
    except StorageUnavailable as exc:
        raise storage_unavailable_exception(exc) from exc
    return _page_to_schema(result)


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCount:
    """Return the number of notifications the user has not read yet."""

    try:
        count = count_unread_notifications_uc(db, user_id=current_user.id)
    except Unauthorized as exc:
        raise unauthorized_exception(str(exc)) from exc
    except StorageUnavailable as exc:
        raise storage_unavailable_exception(exc) from exc
    return UnreadCount(unread_count=count)


@router.patch("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    """Mark one of the user's notifications as read."""

    try:
        mark_notification_as_read_uc(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except NotificationNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Unauthorized as exc:
        raise unauthorized_exception(str(exc)) from exc
    except StorageUnavailable as exc:
        raise storage_unavailable_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> NotificationRead:
    """Deliver a new notification to a user (administrators only)."""

    try:
        notification = create_notification_uc(db, **notification_in.model_dump())
    except NotificationValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors
        ) from exc
    except StorageUnavailable as exc:
        raise storage_unavailable_exception(exc) from exc
    return _notification_to_schema(notification)


__all__ = ["router"]
