"""Pagination: the stateful page cursor and the HTTP query-string dependency."""

import math
from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel

from dalil.core.config import settings

T = TypeVar("T")


def _to_int(value: Any, default: int) -> int:
    """Normalise a page number or page size; never raises."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return round(value) if math.isfinite(value) else default
    try:
        return round(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return default


def page_size(value: Any, default: int) -> int:
    """Normalise a requested page size into `[1, settings.max_page_size]`."""
    return min(max(1, _to_int(value, default)), settings.max_page_size)


def page_count(total_items: int, items_per_page: int) -> int:
    return max(1, math.ceil(total_items / items_per_page))


class PageState(BaseModel):
    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int

    @classmethod
    def clamped(cls, page: int, items_per_page: int, total_items: int) -> "PageState":
        """State for *page* pulled into `[1, total_pages]`."""
        pages = page_count(total_items, items_per_page)
        return cls(
            current_page=min(max(1, page), pages),
            items_per_page=items_per_page,
            total_items=total_items,
            total_pages=pages,
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.items_per_page


class Paginator(Generic[T]):
    """Slices an ordered collection into 1-indexed pages.

    ``current_page`` always lies in ``[1, total_pages]``; every mutator
    re-establishes that before returning. Out-of-range or malformed inputs
    are clamped, never rejected.
    """

    def __init__(self, items: Sequence[T] = (), items_per_page: Any = 10, current_page: Any = 1):
        self._items: list[T] = list(items)
        self._items_per_page = max(1, _to_int(items_per_page, 10))
        self._current_page = 1
        self.set_current_page(current_page)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def total_items(self) -> int:
        return len(self._items)

    @property
    def total_pages(self) -> int:
        return page_count(self.total_items, self._items_per_page)

    @property
    def current_data(self) -> list[T]:
        return self.page_data(self._current_page)

    @property
    def state(self) -> PageState:
        return PageState.clamped(self._current_page, self._items_per_page, self.total_items)

    def page_data(self, page: int) -> list[T]:
        start = (page - 1) * self._items_per_page
        return self._items[start:start + self._items_per_page]

    def iter_pages(self) -> Iterator[list[T]]:
        for page in range(1, self.total_pages + 1):
            yield self.page_data(page)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_current_page(self, page: Any) -> int:
        page = _to_int(page, self._current_page)
        self._current_page = min(max(1, page), self.total_pages)
        return self._current_page

    def set_items_per_page(self, items_per_page: Any) -> None:
        self._items_per_page = max(1, _to_int(items_per_page, self._items_per_page))
        self._current_page = 1

    def set_items(self, items: Sequence[T]) -> None:
        self._items = list(items)
        if self._current_page > self.total_pages:
            self._current_page = 1


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=10`.

    Malformed values fall back to defaults and ``limit`` is capped at
    ``settings.max_page_size``. The page is clamped later, by :class:`Paginator`
    or :meth:`PageState.clamped`, once the collection size is known.
    """

    def __init__(
        self,
        page: str = Query(default="1", description="Page number (1-based)"),
        limit: str | None = Query(default=None, description="Items per page"),
    ):
        self.page = max(1, _to_int(page, 1))
        self.limit = page_size(limit, settings.default_page_size)


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}

    @classmethod
    def from_state(cls, state: PageState) -> "PageMeta":
        return cls(
            total=state.total_items,
            page=state.current_page,
            limit=state.items_per_page,
            pages=state.total_pages,
        )
