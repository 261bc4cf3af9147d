"""Listing schemas: the record shape and the criteria the pipeline consumes."""

from __future__ import annotations

import datetime as dt
import enum
from typing import Any

from pydantic import Field

from dalil.schemas.common import CamelModel


def to_date(value: dt.date | dt.datetime | str | None) -> dt.date | None:
    """Best-effort conversion of a record date. Returns ``None`` when unparsable."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    s = str(value).strip()
    if not s:
        return None
    try:
        return dt.date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        return None


class Record(CamelModel):
    """One filterable item (a legal text, a procedure, a library entry...).

    ``extra`` holds display-only fields the pipeline never looks at except
    for free-text search.
    """

    id: str
    title: str
    type: str | None = None
    status: str | None = None
    date: dt.date | dt.datetime | str | None = None
    source: str | None = None
    author: str | None = None
    insertion_method: str | None = None
    popularity: float | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    model_config = {
        **CamelModel.model_config,
        "frozen": True,
    }

    @property
    def date_value(self) -> dt.date | None:
        return to_date(self.date)


class DateRange(CamelModel):
    """Inclusive date window. A missing bound leaves that side open."""

    start: dt.date | None = None
    end: dt.date | None = None

    def contains(self, value: dt.date | None) -> bool:
        if value is None:
            return False
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


class FilterCriteria(CamelModel):
    types: list[str] = Field(default_factory=list)
    statuses: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)
    insertion_methods: list[str] = Field(default_factory=list)
    date_range: DateRange | None = None
    query: str | None = None


class SortField(str, enum.Enum):
    DATE = "date"
    TITLE = "title"
    TYPE = "type"
    STATUS = "status"
    POPULARITY = "popularity"


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(CamelModel):
    field: SortField = SortField.DATE
    direction: SortDirection = SortDirection.DESC


class Facets(CamelModel):
    """Distinct values per facet field, in first-occurrence order."""

    types: list[str] = Field(default_factory=list)
    statuses: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)
    insertion_methods: list[str] = Field(default_factory=list)
