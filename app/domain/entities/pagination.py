"""Value objects describing a page request and the page returned for it."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Normalized pagination parameters.

    Instances should be created with :meth:`normalize`, which clamps the raw
    values instead of rejecting them: a page below ``1`` becomes the first
    page, a size below ``1`` becomes ``default_page_size`` and a size above
    ``max_page_size`` is capped.
    """

    page: int
    page_size: int
    unread_only: bool = False

    @classmethod
    def normalize(
        cls,
        page: int | None,
        page_size: int | None,
        unread_only: bool = False,
        *,
        default_page_size: int,
        max_page_size: int,
    ) -> "PageRequest":
        effective_page = page if page is not None and page >= 1 else 1
        if page_size is None or page_size < 1:
            effective_size = default_page_size
        else:
            effective_size = page_size
        effective_size = max(1, min(effective_size, max_page_size))
        return cls(
            page=effective_page,
            page_size=effective_size,
            unread_only=bool(unread_only),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """A single page of items together with the total number of matches."""

    items: tuple[T, ...]
    total_count: int
    page: int
    page_size: int

    @classmethod
    def create(
        cls, items: Sequence[T], total_count: int, request: PageRequest
    ) -> "PaginatedResult[T]":
        return cls(
            items=tuple(items),
            total_count=total_count,
            page=request.page,
            page_size=request.page_size,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages


__all__ = ["PageRequest", "PaginatedResult"]
