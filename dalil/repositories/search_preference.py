"""Saved search preference repository."""


from dalil.domain.search_preference import SearchPreference
from dalil.repositories.base import BaseRepository


class SearchPreferenceRepository(BaseRepository[SearchPreference]):
    model = SearchPreference

    async def recent(self, limit: int) -> list[SearchPreference]:
        """Most recently used presets first."""
        return await self.slice(limit=limit, order_by="last_used", order="desc")
