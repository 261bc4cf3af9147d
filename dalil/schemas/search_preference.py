"""Saved search preference schemas."""


from datetime import datetime

from pydantic import Field

from dalil.schemas.common import CamelModel
from dalil.schemas.listing import FilterCriteria, SortSpec

class SearchPreferenceCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    search_term: str | None = None
    filters: FilterCriteria = Field(default_factory=FilterCriteria)
    sort: SortSpec = Field(default_factory=SortSpec)

class SearchPreferenceUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    search_term: str | None = None
    filters: FilterCriteria | None = None
    sort: SortSpec | None = None

class SearchPreferenceOut(CamelModel):
    id: str
    name: str
    search_term: str | None = None
    filters: FilterCriteria
    sort: SortSpec
    created_at: datetime
    last_used: datetime
