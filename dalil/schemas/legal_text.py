"""Legal text Pydantic schemas (request DTOs and response models)."""


from datetime import date, datetime
from typing import Any

from pydantic import Field

from dalil.schemas.common import CamelModel

class LegalTextCreate(CamelModel):
    title: str = Field(min_length=1, max_length=500)
    type: str | None = None
    status: str | None = None
    publication_date: date | None = None
    source: str | None = None
    author: str | None = None
    insertion_method: str | None = None
    popularity: float | None = Field(default=None, ge=0)
    reference: str | None = None
    description: str | None = None
    extra: dict[str, Any] | None = None

class LegalTextOut(CamelModel):
    id: str
    title: str
    type: str | None = None
    status: str | None = None
    publication_date: date | None = None
    source: str | None = None
    author: str | None = None
    insertion_method: str | None = None
    popularity: float | None = None
    reference: str | None = None
    description: str | None = None
    extra: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime
