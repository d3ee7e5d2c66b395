"""Pagination primitives shared by list use cases and API routes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Generic, Literal, TypeVar

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]

DEFAULT_PAGE: Final[int] = 1
DEFAULT_LIMIT: Final[int] = 10
MAX_LIMIT: Final[int] = 100


@dataclass(frozen=True)
class PaginationParams:
    """Normalized paging and sorting options for a list query."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str | None = None
    sort_order: SortOrder = "desc"

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """A slice of results together with the metadata needed to navigate it."""

    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


def build_pagination_params(
    page: int | str | None = None,
    limit: int | str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> PaginationParams:
    """Return sanitized pagination parameters.

    Invalid or out-of-range values fall back to the defaults instead of raising:
    ``page`` below 1 becomes 1, ``limit`` below 1 becomes 10 and anything above
    100 is clamped to 100. ``sort_order`` is ``desc`` unless ``asc`` is given.
    """

    parsed_page = _to_int(page)
    if parsed_page is None or parsed_page < 1:
        parsed_page = DEFAULT_PAGE

    parsed_limit = _to_int(limit)
    if parsed_limit is None or parsed_limit < 1:
        parsed_limit = DEFAULT_LIMIT
    parsed_limit = min(parsed_limit, MAX_LIMIT)

    order: SortOrder = "asc" if (sort_order or "").lower() == "asc" else "desc"
    sort_field = sort_by.strip() if sort_by and sort_by.strip() else None

    return PaginationParams(
        page=parsed_page,
        limit=parsed_limit,
        sort_by=sort_field,
        sort_order=order,
    )


def build_page(items: Sequence[T], *, total: int, params: PaginationParams) -> Page[T]:
    total_pages = math.ceil(total / params.limit) if total else 0
    return Page(
        data=list(items),
        total=total,
        page=params.page,
        limit=params.limit,
        total_pages=total_pages,
        has_next=params.skip + params.limit < total,
        has_prev=params.page > 1,
    )


def _to_int(value: int | str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "Page",
    "PaginationParams",
    "SortOrder",
    "build_page",
    "build_pagination_params",
]
