"""Translate driver level failures into domain errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError, TimeoutError
from sqlalchemy.orm import Session

from app.domain.errors import StorageUnavailable

logger = logging.getLogger(__name__)

UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, TimeoutError)


@contextmanager
def storage_errors(session: Session, operation: str) -> Iterator[None]:
    """Re-raise connectivity failures inside the block as :class:`StorageUnavailable`.

    Integrity and programming errors are left untouched; they are bugs or
    conflicts rather than an unreachable store.
    """

    try:
        yield
    except UNAVAILABLE_ERRORS as exc:
        logger.exception("Storage failure while trying to %s", operation)
        session.rollback()
        raise StorageUnavailable(f"Unable to {operation}: storage unavailable") from exc


__all__ = ["UNAVAILABLE_ERRORS", "storage_errors"]
