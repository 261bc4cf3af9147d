"""Legal text service — catalogue reads and the filtered listing.

Rule: No FastAPI here. The repository loads rows, the pure listing pipeline
shapes them.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from dalil.core.exceptions import NotFoundError
from dalil.core.pagination import PageState
from dalil.domain.legal_text import LegalText
from dalil.repositories.legal_text import LegalTextRepository
from dalil.schemas.legal_text import LegalTextCreate
from dalil.schemas.listing import Facets, FilterCriteria, Record, SortSpec
from dalil.services.facets import extract_facets
from dalil.services.listing import build_listing, ensure_valid_criteria

logger = logging.getLogger(__name__)


def to_record(text: LegalText) -> Record:
    """Project an ORM row onto the pipeline's record shape."""
    extra = dict(text.extra or {})
    if text.reference:
        extra.setdefault("reference", text.reference)
    if text.description:
        extra.setdefault("description", text.description)
    return Record(
        id=text.id,
        title=text.title,
        type=text.type,
        status=text.status,
        date=text.publication_date,
        source=text.source,
        author=text.author,
        insertion_method=text.insertion_method,
        popularity=text.popularity,
        extra=extra,
    )


class LegalTextService:
    def __init__(self, session: AsyncSession, client_id: str):
        self._repo = LegalTextRepository(session, client_id)

    async def list_texts(
        self,
        criteria: FilterCriteria,
        sort: SortSpec,
        page: int,
        limit: int,
    ) -> tuple[list[LegalText], PageState]:
        ensure_valid_criteria(criteria)
        rows = await self._repo.all()
        by_id = {row.id: row for row in rows}
        listing = build_listing(
            (to_record(row) for row in rows),
            criteria,
            sort,
            page=page,
            items_per_page=limit,
        )
        return [by_id[r.id] for r in listing.items], listing.page

    async def facets(self) -> Facets:
        rows = await self._repo.all()
        return extract_facets(to_record(row) for row in rows)

    async def get_text(self, text_id: str) -> LegalText:
        text = await self._repo.get_by_id(text_id)
        if not text:
            raise NotFoundError("Legal text", text_id)
        return text

    async def create_text(self, data: LegalTextCreate) -> LegalText:
        text = await self._repo.create(**data.model_dump(exclude_none=True))
        logger.info("Created legal text %s (%s)", text.id, text.type or "untyped")
        return text
