"""SQLAlchemy implementation of the ResourceRepository for indexed documents."""

import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docs_assistant.application.interfaces import ResourceRepository
from docs_assistant.domain.entities import CategoryCount, Resource
from docs_assistant.infrastructure.database.models.resource_chunk_models import ResourceChunkModel
from docs_assistant.infrastructure.database.models.resource_models import ResourceModel


class SQLAlchemyResourceRepository(ResourceRepository):
    """Concrete resource repository backed by PostgreSQL via SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, resource: Resource) -> Resource:
        if not resource.id:
            resource.id = str(uuid.uuid4())

        model = ResourceModel(
            id=resource.id,
            content=resource.content,
            category=resource.category,
            source_url=resource.source_url,
            source_title=resource.source_title,
            created_at=resource.created_at,
        )

        self._session.add(model)
        await self._session.flush()
        return resource

    async def delete(self, resource_id: str) -> bool:
        model = await self._session.get(ResourceModel, resource_id)
        if model is None:
            return False
        await self._session.execute(
            delete(ResourceChunkModel).where(ResourceChunkModel.resource_id == resource_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_all(self) -> int:
        # Chunks first, so the foreign key holds even without ON DELETE CASCADE
        await self._session.execute(delete(ResourceChunkModel))
        result = await self._session.execute(delete(ResourceModel))
        await self._session.flush()
        return result.rowcount or 0

    async def category_counts(self) -> list[CategoryCount]:
        count_col = func.count(ResourceModel.id).label("count")
        result = await self._session.execute(
            select(ResourceModel.category, count_col)
            .where(ResourceModel.category.is_not(None))
            .group_by(ResourceModel.category)
            .order_by(count_col.desc(), ResourceModel.category)
        )
        return [CategoryCount(name=row.category, count=int(row.count)) for row in result.all()]
