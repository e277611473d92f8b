"""Indexing service — orchestrates chunking, embedding generation, and storage.

This is an application service that coordinates:
1. Creating the Resource record for a document
2. Splitting its text into chunks
3. Generating embeddings via the EmbeddingGateway
4. Storing chunks + embeddings via the ChunkRepository
"""

import logging
import time

from docs_assistant.application.interfaces import ChunkRepository, ResourceRepository
from docs_assistant.application.services.embedding_gateway import EmbeddingGateway
from docs_assistant.application.services.text_chunker import chunk_text
from docs_assistant.domain.entities import DocumentProvenance, Resource, ResourceChunk
from docs_assistant.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("IndexingPipeline")


class DocumentIndexingService:
    """Application service for turning raw documents into searchable chunks."""

    def __init__(
        self,
        resource_repository: ResourceRepository,
        chunk_repository: ChunkRepository,
        embedding_gateway: EmbeddingGateway,
    ):
        self._resource_repo = resource_repository
        self._chunk_repo = chunk_repository
        self._embeddings = embedding_gateway

    async def index_document(
        self,
        raw_text: str,
        provenance: DocumentProvenance | None = None,
    ) -> Resource | None:
        """Create a resource for ``raw_text`` and store its embedded chunks.

        Returns the created resource, or None when the text is blank.
        Embedding and storage errors propagate to the caller.
        """
        provenance = provenance or DocumentProvenance()
        text = raw_text.strip()
        if not text:
            logger.info("Skipping empty document %s", provenance.source_url or "<inline>")
            return None

        start = time.monotonic()
        resource = await self._resource_repo.create(Resource.from_provenance(text, provenance))
        plog.step_start(
            PipelineStage.STORE,
            f"Created resource '{provenance.source_title or resource.id}'",
            category=provenance.category,
        )

        chunks = [c for c in chunk_text(text) if c.content]
        plog.step_start(PipelineStage.CHUNK, f"Split into {len(chunks)} chunks", chars=len(text))

        embeddings = await self._embeddings.embed_many([c.content for c in chunks])

        records = [
            ResourceChunk(
                resource_id=resource.id,
                chunk_index=chunk.position,
                content=chunk.content,
                embedding=embedding,
                has_code=chunk.has_code,
                language=chunk.language,
            )
            for chunk, embedding in zip(chunks, embeddings, strict=True)
        ]
        await self._chunk_repo.store_chunks(records)

        duration_ms = int((time.monotonic() - start) * 1000)
        plog.step_complete(
            PipelineStage.COMPLETE,
            f"Indexed '{provenance.source_title or resource.id}'",
            chunks=len(records),
            duration_ms=duration_ms,
        )
        return resource

    async def delete_document(self, resource_id: str) -> bool:
        """Delete one resource; its chunks are removed first."""
        await self._chunk_repo.delete_by_resource(resource_id)
        return await self._resource_repo.delete(resource_id)

    async def clear_index(self) -> int:
        """Remove every resource and chunk ahead of a full re-index."""
        deleted = await self._resource_repo.delete_all()
        plog.step_complete(PipelineStage.PIPELINE, "Cleared existing index", resources=deleted)
        return deleted
