"""Filter predicate evaluation over in-memory record collections.

Every criterion is optional: an absent or empty list leaves its field
unconstrained. A record passes only when it satisfies all active criteria.

Rule: pure functions, input collections are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable

from dalil.core.text import fold
from dalil.schemas.listing import FilterCriteria, Record

DEFAULT_INSERTION_METHOD = "manual"

# Fields scanned by the free-text query, in addition to string values of ``extra``
_SEARCHABLE_FIELDS: tuple[str, ...] = ("title", "type", "source", "author")


def insertion_method_of(record: Record) -> str:
    return record.insertion_method or DEFAULT_INSERTION_METHOD


def _member(value: str | None, allowed: list[str]) -> bool:
    return bool(value) and value in allowed


def matches_query(record: Record, query: str | None) -> bool:
    """Case- and accent-insensitive substring search across text fields."""
    needle = fold(query).strip()
    if not needle:
        return True
    haystack = [getattr(record, name) for name in _SEARCHABLE_FIELDS]
    haystack.extend(v for v in record.extra.values() if isinstance(v, str))
    return any(needle in fold(value) for value in haystack if value)


def matches(record: Record, criteria: FilterCriteria) -> bool:
    """Return True when *record* satisfies every active criterion."""
    if criteria.types and not _member(record.type, criteria.types):
        return False
    if criteria.statuses and not _member(record.status, criteria.statuses):
        return False
    if criteria.insertion_methods and insertion_method_of(record) not in criteria.insertion_methods:
        return False
    if criteria.date_range is not None and not criteria.date_range.contains(record.date_value):
        return False
    if criteria.sources and not _member(record.source, criteria.sources):
        return False
    if criteria.authors and not _member(record.author, criteria.authors):
        return False
    return matches_query(record, criteria.query)


def filter_records(records: Iterable[Record], criteria: FilterCriteria | None) -> list[Record]:
    """Return the records matching *criteria*, in input order."""
    if criteria is None:
        return list(records)
    return [r for r in records if matches(r, criteria)]
