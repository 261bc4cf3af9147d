"""Saved search preference router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dalil.core.config import settings
from dalil.core.pagination import PaginationParams, page_size
from dalil.core.response import DataResponse, ListResponse, paginated
from dalil.db.base import get_db
from dalil.schemas.common import ErrorResponse
from dalil.schemas.legal_text import LegalTextOut
from dalil.schemas.search_preference import (
    SearchPreferenceCreate,
    SearchPreferenceOut,
    SearchPreferenceUpdate,
)
from dalil.services.search_preferences import SearchPreferenceService

router = APIRouter(
    prefix="/search-preferences",
    tags=["Search preferences"],
    responses={404: {"model": ErrorResponse}},
)


def _svc(session: AsyncSession) -> SearchPreferenceService:
    return SearchPreferenceService(session, settings.default_client_id)


@router.get("", response_model=ListResponse[SearchPreferenceOut])
async def list_search_preferences(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List saved searches, newest first."""
    items, state = await _svc(session).list_preferences(pagination)
    return paginated([SearchPreferenceOut.model_validate(p) for p in items], state)


@router.get("/recent", response_model=DataResponse[list[SearchPreferenceOut]])
async def recent_search_preferences(
    limit: Optional[str] = Query(default=None, description="How many to return"),
    session: AsyncSession = Depends(get_db),
):
    """Most recently used saved searches."""
    items = await _svc(session).recent(page_size(limit, settings.recent_searches_limit))
    return {"data": [SearchPreferenceOut.model_validate(p) for p in items]}


@router.post("", response_model=DataResponse[SearchPreferenceOut], status_code=status.HTTP_201_CREATED)
async def create_search_preference(
    body: SearchPreferenceCreate,
    session: AsyncSession = Depends(get_db),
):
    pref = await _svc(session).create_preference(body)
    return {"data": SearchPreferenceOut.model_validate(pref)}


@router.get("/{pref_id}", response_model=DataResponse[SearchPreferenceOut])
async def get_search_preference(
    pref_id: str,
    session: AsyncSession = Depends(get_db),
):
    pref = await _svc(session).get_preference(pref_id)
    return {"data": SearchPreferenceOut.model_validate(pref)}


@router.put("/{pref_id}", response_model=DataResponse[SearchPreferenceOut])
async def update_search_preference(
    pref_id: str,
    body: SearchPreferenceUpdate,
    session: AsyncSession = Depends(get_db),
):
    pref = await _svc(session).update_preference(pref_id, body)
    return {"data": SearchPreferenceOut.model_validate(pref)}


@router.delete("/{pref_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_search_preference(
    pref_id: str,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_preference(pref_id)


@router.post("/{pref_id}/use", response_model=DataResponse[SearchPreferenceOut])
async def use_search_preference(
    pref_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Mark a saved search as used now."""
    pref = await _svc(session).mark_used(pref_id)
    return {"data": SearchPreferenceOut.model_validate(pref)}


@router.get("/{pref_id}/results", response_model=ListResponse[LegalTextOut])
async def search_preference_results(
    pref_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Run a saved search over the catalogue (and mark it as used)."""
    items, state = await _svc(session).run_preference(pref_id, pagination.page, pagination.limit)
    return paginated([LegalTextOut.model_validate(t) for t in items], state)
