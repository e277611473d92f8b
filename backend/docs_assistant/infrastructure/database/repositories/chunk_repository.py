"""SQLAlchemy implementation of ChunkRepository — pgvector-powered vector search."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from docs_assistant.application.interfaces.chunk_repository import ChunkRepository
from docs_assistant.domain.entities import (
    ChunkSearchResult,
    ChunkWithProvenance,
    ResourceChunk,
)
from docs_assistant.infrastructure.database.models.resource_chunk_models import ResourceChunkModel
from docs_assistant.infrastructure.database.models.resource_models import ResourceModel

logger = logging.getLogger(__name__)


class PgChunkRepository(ChunkRepository):
    """Concrete chunk repository backed by PostgreSQL + pgvector."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def store_chunks(self, chunks: list[ResourceChunk]) -> None:
        """Persist a batch of resource chunks with their embeddings."""
        if not chunks:
            return

        models = [
            ResourceChunkModel(
                resource_id=chunk.resource_id,
                chunk_index=chunk.chunk_index,
                content=chunk.content,
                embedding=chunk.embedding,
                has_code=chunk.has_code,
                language=chunk.language,
            )
            for chunk in chunks
        ]

        # One flush per list keeps ids ascending in chunk order
        self._session.add_all(models)
        await self._session.flush()
        for chunk, model in zip(chunks, models):
            chunk.id = model.id
        logger.info("Stored %d chunks for resource %s", len(models), chunks[0].resource_id)

    async def delete_by_resource(self, resource_id: str) -> int:
        """Delete all chunks belonging to a resource."""
        result = await self._session.execute(
            delete(ResourceChunkModel).where(
                ResourceChunkModel.resource_id == resource_id
            )
        )
        count = result.rowcount or 0
        if count > 0:
            logger.info("Deleted %d chunks for resource %s", count, resource_id)
        return count

    async def get_by_resource(self, resource_id: str) -> list[ChunkWithProvenance]:
        """All chunks of a resource in insertion order, with provenance joined."""
        result = await self._session.execute(
            select(
                ResourceChunkModel.id,
                ResourceChunkModel.resource_id,
                ResourceChunkModel.content,
                ResourceModel.category,
                ResourceModel.source_url,
                ResourceModel.source_title,
            )
            .select_from(ResourceChunkModel)
            .join(ResourceModel, ResourceModel.id == ResourceChunkModel.resource_id)
            .where(ResourceChunkModel.resource_id == resource_id)
            .order_by(ResourceChunkModel.id.asc())
        )
        return [
            ChunkWithProvenance(
                id=row.id,
                resource_id=row.resource_id,
                content=row.content,
                category=row.category,
                source_url=row.source_url,
                source_title=row.source_title,
            )
            for row in result.all()
        ]

    async def search_similar(
        self,
        query_embedding: list[float],
        *,
        categories: list[str] | None = None,
        min_similarity: float = 0.3,
        limit: int = 4,
    ) -> list[ChunkSearchResult]:
        """Find chunks most similar to the query embedding using cosine similarity.

        Joins with the resources table to apply the category filter and
        return resource-level provenance alongside chunk-level scores.
        """
        # 1 - (embedding <=> query) gives cosine similarity
        similarity = (
            1 - ResourceChunkModel.embedding.cosine_distance(query_embedding)
        ).label("similarity")

        query = (
            select(
                ResourceChunkModel.id,
                ResourceChunkModel.resource_id,
                ResourceChunkModel.content,
                ResourceModel.category,
                ResourceModel.source_url,
                ResourceModel.source_title,
                similarity,
            )
            .select_from(ResourceChunkModel)
            .outerjoin(ResourceModel, ResourceModel.id == ResourceChunkModel.resource_id)
            .where(similarity > min_similarity)
        )

        if categories:
            query = query.where(ResourceModel.category.in_(categories))

        query = query.order_by(
            similarity.desc(),
            ResourceChunkModel.resource_id.asc(),
            ResourceChunkModel.id.asc(),
        ).limit(limit)

        result = await self._session.execute(query)

        return [
            ChunkSearchResult(
                content=row.content,
                similarity=float(row.similarity),
                resource_id=row.resource_id,
                category=row.category,
                source_url=row.source_url,
                source_title=row.source_title,
                chunk_id=row.id,
            )
            for row in result.all()
        ]
