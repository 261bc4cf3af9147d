"""Record ordering with French collation for text fields."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterable
from typing import Any

from dalil.core.text import fold
from dalil.schemas.listing import Record, SortDirection, SortField, SortSpec

# Unparsable or missing dates sort as the earliest possible date
_MISSING_DATE = dt.date.min


def _date_key(record: Record) -> dt.date:
    return record.date_value or _MISSING_DATE


def _popularity_key(record: Record) -> float:
    return record.popularity or 0


def _text_key(field: str) -> Callable[[Record], str]:
    # Base-level collation: "É", "é" and "e" compare equal, ties stay in input order
    def key(record: Record) -> str:
        return fold(getattr(record, field))

    return key


_KEYS: dict[SortField, Callable[[Record], Any]] = {
    SortField.DATE: _date_key,
    SortField.TITLE: _text_key("title"),
    SortField.TYPE: _text_key("type"),
    SortField.STATUS: _text_key("status"),
    SortField.POPULARITY: _popularity_key,
}


def sort_records(records: Iterable[Record], spec: SortSpec | None = None) -> list[Record]:
    """Return a new list ordered by *spec*.

    Python's sort is stable for ``reverse=True`` as well, so equal keys keep
    their relative input order in both directions.
    """
    spec = spec or SortSpec()
    return sorted(
        records,
        key=_KEYS[spec.field],
        reverse=spec.direction == SortDirection.DESC,
    )
