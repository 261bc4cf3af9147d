"""Legal text repository.

Filtering, sorting and paging of legal texts happen in memory
(:mod:`dalil.services.listing`), so this repository only loads and stores rows.
"""


from dalil.domain.legal_text import LegalText
from dalil.repositories.base import BaseRepository


class LegalTextRepository(BaseRepository[LegalText]):
    model = LegalText

    async def is_empty(self) -> bool:
        return await self.count() == 0
