"""Listing pipeline: filter -> sort -> paginate.

Rule: No SQLAlchemy / no FastAPI here. Callers load the collection and
hand it over as :class:`Record` objects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from dalil.core.exceptions import ValidationError
from dalil.core.pagination import PageState, Paginator
from dalil.schemas.listing import FilterCriteria, Record, SortSpec
from dalil.services.filtering import filter_records
from dalil.services.sorting import sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Listing:
    items: list[Record]
    page: PageState


def ensure_valid_criteria(criteria: FilterCriteria) -> None:
    """Reject criteria that can only come from a client mistake."""
    rng = criteria.date_range
    if rng is not None and rng.start and rng.end and rng.start > rng.end:
        raise ValidationError(
            f"dateFrom ({rng.start.isoformat()}) must be on or before dateTo ({rng.end.isoformat()})"
        )


def build_listing(
    records: Iterable[Record],
    criteria: FilterCriteria | None = None,
    sort: SortSpec | None = None,
    page: Any = 1,
    items_per_page: Any = 10,
) -> Listing:
    """Run the whole pipeline and return the requested page plus its state."""
    filtered = filter_records(records, criteria)
    ordered = sort_records(filtered, sort)
    paginator: Paginator[Record] = Paginator(ordered, items_per_page=items_per_page, current_page=page)
    logger.debug(
        "Listing: %d matched, page %d/%d",
        paginator.total_items, paginator.current_page, paginator.total_pages,
    )
    return Listing(items=paginator.current_data, page=paginator.state)
