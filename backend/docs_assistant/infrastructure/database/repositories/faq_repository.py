"""SQLAlchemy implementation of the FaqRepository."""

import uuid

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from docs_assistant.application.interfaces import FaqRepository
from docs_assistant.domain.entities import FaqEntry
from docs_assistant.infrastructure.database.models.faq_models import FaqModel


class SQLAlchemyFaqRepository(FaqRepository):
    """Concrete FAQ repository backed by PostgreSQL via SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_all(self) -> list[FaqEntry]:
        result = await self._session.execute(
            select(FaqModel).order_by(FaqModel.created_at.asc(), FaqModel.id.asc())
        )
        return [self._to_domain(m) for m in result.scalars().all()]

    async def create(self, entry: FaqEntry) -> FaqEntry:
        if not entry.id:
            entry.id = str(uuid.uuid4())

        model = FaqModel(
            id=entry.id,
            question=entry.question,
            answer=entry.answer,
            category=entry.category,
            hits=entry.hits,
            last_used=entry.last_used,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return entry

    async def record_hit(self, entry_id: str) -> None:
        # Single UPDATE so concurrent hits never lose an increment
        await self._session.execute(
            update(FaqModel)
            .where(FaqModel.id == entry_id)
            .values(hits=FaqModel.hits + 1, last_used=func.now())
        )
        await self._session.flush()

    def _to_domain(self, model: FaqModel) -> FaqEntry:
        return FaqEntry(
            id=model.id,
            question=model.question,
            answer=model.answer,
            category=model.category,
            hits=model.hits or 0,
            last_used=model.last_used,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
