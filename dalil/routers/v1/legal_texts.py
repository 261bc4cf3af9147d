"""Legal text router — catalogue listing with filters, sort, pagination and facets.

Pattern:
  1. Parse query-string filters into FilterCriteria / SortSpec
  2. Instantiate the service with (session, default client)
  3. Wrap the result in the response envelope
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dalil.core.config import settings
from dalil.core.pagination import PaginationParams
from dalil.core.response import DataResponse, ListResponse, paginated
from dalil.db.base import get_db
from dalil.schemas.common import ErrorResponse
from dalil.schemas.legal_text import LegalTextCreate, LegalTextOut
from dalil.schemas.listing import (
    DateRange,
    Facets,
    FilterCriteria,
    SortDirection,
    SortField,
    SortSpec,
)
from dalil.services.legal_text import LegalTextService

router = APIRouter(prefix="/legal-texts", tags=["Legal texts"])


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> LegalTextService:
    return LegalTextService(session, settings.default_client_id)


def filter_criteria(
    types: Optional[list[str]] = Query(default=None, alias="type", description="Allowed types (repeatable)"),
    statuses: Optional[list[str]] = Query(default=None, alias="status", description="Allowed statuses (repeatable)"),
    sources: Optional[list[str]] = Query(default=None, alias="source"),
    authors: Optional[list[str]] = Query(default=None, alias="author"),
    insertion_methods: Optional[list[str]] = Query(default=None, alias="insertionMethod"),
    date_from: Optional[date] = Query(default=None, alias="dateFrom", description="Inclusive lower bound"),
    date_to: Optional[date] = Query(default=None, alias="dateTo", description="Inclusive upper bound"),
    q: Optional[str] = Query(default=None, description="Free-text search (case and accent insensitive)"),
) -> FilterCriteria:
    date_range = None
    if date_from is not None or date_to is not None:
        date_range = DateRange(start=date_from, end=date_to)
    return FilterCriteria(
        types=types or [],
        statuses=statuses or [],
        sources=sources or [],
        authors=authors or [],
        insertion_methods=insertion_methods or [],
        date_range=date_range,
        query=q,
    )


def sort_spec(
    sort: SortField = Query(default=SortField.DATE, description="Sort field"),
    order: SortDirection = Query(default=SortDirection.DESC, description="Sort order"),
) -> SortSpec:
    return SortSpec(field=sort, direction=order)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get(
    "",
    response_model=ListResponse[LegalTextOut],
    responses={422: {"model": ErrorResponse}},
)
async def list_legal_texts(
    criteria: FilterCriteria = Depends(filter_criteria),
    sort: SortSpec = Depends(sort_spec),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List legal texts. Out-of-range pages are clamped to the last page."""
    items, state = await _svc(session).list_texts(criteria, sort, pagination.page, pagination.limit)
    return paginated([LegalTextOut.model_validate(t) for t in items], state)


@router.get("/facets", response_model=DataResponse[Facets])
async def legal_text_facets(session: AsyncSession = Depends(get_db)):
    """Distinct filter values over the whole catalogue, in first-occurrence order."""
    return {"data": await _svc(session).facets()}


@router.post("", response_model=DataResponse[LegalTextOut], status_code=status.HTTP_201_CREATED)
async def create_legal_text(
    body: LegalTextCreate,
    session: AsyncSession = Depends(get_db),
):
    text = await _svc(session).create_text(body)
    return {"data": LegalTextOut.model_validate(text)}


@router.get(
    "/{text_id}",
    response_model=DataResponse[LegalTextOut],
    responses={404: {"model": ErrorResponse}},
)
async def get_legal_text(
    text_id: str,
    session: AsyncSession = Depends(get_db),
):
    text = await _svc(session).get_text(text_id)
    return {"data": LegalTextOut.model_validate(text)}
