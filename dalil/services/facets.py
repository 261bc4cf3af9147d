"""Facet extraction: distinct values offered as filter options."""

from __future__ import annotations

from collections.abc import Iterable

from dalil.schemas.listing import Facets, Record
from dalil.services.filtering import insertion_method_of


def _distinct(values: Iterable[str | None]) -> list[str]:
    # dict keeps insertion order, so the result is in first-occurrence order
    return list(dict.fromkeys(v for v in values if v))


def extract_facets(records: Iterable[Record]) -> Facets:
    records = list(records)
    return Facets(
        types=_distinct(r.type for r in records),
        statuses=_distinct(r.status for r in records),
        sources=_distinct(r.source for r in records),
        authors=_distinct(r.author for r in records),
        insertion_methods=_distinct(insertion_method_of(r) for r in records),
    )
