"""Saved search preference service.

A preference is a named FilterCriteria + SortSpec + search term. Using one
(reading its results or marking it explicitly) bumps ``last_used`` so the
"recent searches" list stays ordered by actual use.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from dalil.core.exceptions import NotFoundError
from dalil.core.pagination import PageState, PaginationParams
from dalil.domain.legal_text import LegalText
from dalil.domain.mixins import utcnow
from dalil.domain.search_preference import SearchPreference
from dalil.repositories.search_preference import SearchPreferenceRepository
from dalil.schemas.listing import FilterCriteria, SortSpec
from dalil.schemas.search_preference import SearchPreferenceCreate, SearchPreferenceUpdate
from dalil.services.legal_text import LegalTextService
from dalil.services.listing import ensure_valid_criteria

logger = logging.getLogger(__name__)


def criteria_of(pref: SearchPreference) -> FilterCriteria:
    criteria = FilterCriteria.model_validate(pref.filters or {})
    if pref.search_term:
        criteria = criteria.model_copy(update={"query": pref.search_term})
    return criteria


def sort_of(pref: SearchPreference) -> SortSpec:
    return SortSpec.model_validate(pref.sort or {})


class SearchPreferenceService:
    def __init__(self, session: AsyncSession, client_id: str):
        self._session = session
        self._client_id = client_id
        self._repo = SearchPreferenceRepository(session, client_id)

    async def list_preferences(
        self, pagination: PaginationParams
    ) -> tuple[list[SearchPreference], PageState]:
        """One page of saved searches, newest first. The page is clamped like the listing."""
        state = PageState.clamped(pagination.page, pagination.limit, await self._repo.count())
        items = await self._repo.slice(
            offset=state.offset,
            limit=state.items_per_page,
            order_by="created_at",
            order="desc",
        )
        return items, state

    async def recent(self, limit: int) -> list[SearchPreference]:
        return await self._repo.recent(limit)

    async def get_preference(self, pref_id: str) -> SearchPreference:
        pref = await self._repo.get_by_id(pref_id)
        if not pref:
            raise NotFoundError("Search preference", pref_id)
        return pref

    async def create_preference(self, data: SearchPreferenceCreate) -> SearchPreference:
        ensure_valid_criteria(data.filters)
        pref = await self._repo.create(
            name=data.name,
            search_term=data.search_term,
            filters=data.filters.model_dump(mode="json"),
            sort=data.sort.model_dump(mode="json"),
            last_used=utcnow(),
        )
        logger.info("Saved search preference %s (%s)", pref.id, pref.name)
        return pref

    async def update_preference(self, pref_id: str, data: SearchPreferenceUpdate) -> SearchPreference:
        _ = await self.get_preference(pref_id)  # raises 404 if missing
        values = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"filters", "sort"})
        if data.filters is not None:
            ensure_valid_criteria(data.filters)
            values["filters"] = data.filters.model_dump(mode="json")
        if data.sort is not None:
            values["sort"] = data.sort.model_dump(mode="json")
        values["last_used"] = utcnow()
        updated = await self._repo.update(pref_id, **values)
        return updated  # type: ignore[return-value]

    async def mark_used(self, pref_id: str) -> SearchPreference:
        _ = await self.get_preference(pref_id)
        updated = await self._repo.update(pref_id, last_used=utcnow())
        return updated  # type: ignore[return-value]

    async def delete_preference(self, pref_id: str) -> None:
        deleted = await self._repo.soft_delete(pref_id)
        if not deleted:
            raise NotFoundError("Search preference", pref_id)

    async def run_preference(
        self, pref_id: str, page: int, limit: int
    ) -> tuple[list[LegalText], PageState]:
        """Mark the preference as used and list the legal texts it selects."""
        pref = await self.mark_used(pref_id)
        texts = LegalTextService(self._session, self._client_id)
        return await texts.list_texts(criteria_of(pref), sort_of(pref), page, limit)
