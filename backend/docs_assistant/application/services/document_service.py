"""Document service — reassembles full documents and lists indexed categories."""

from docs_assistant.application.interfaces import ChunkRepository, ResourceRepository
from docs_assistant.domain.entities import CategoryCount, FullDocument

CHUNK_SEPARATOR = "\n\n"


class DocumentService:
    """Read-side use cases over indexed resources."""

    def __init__(
        self,
        chunk_repository: ChunkRepository,
        resource_repository: ResourceRepository,
    ):
        self._chunk_repo = chunk_repository
        self._resource_repo = resource_repository

    async def get_full_document(self, resource_id: str) -> FullDocument | None:
        """Rebuild a document from its chunks in insertion order.

        Returns None when the resource is unknown or has no chunks.
        """
        chunks = await self._chunk_repo.get_by_resource(resource_id)
        if not chunks:
            return None

        first = chunks[0]
        return FullDocument(
            resource_id=resource_id,
            content=CHUNK_SEPARATOR.join(c.content for c in chunks),
            chunk_count=len(chunks),
            category=first.category,
            source_url=first.source_url,
            source_title=first.source_title,
        )

    async def list_categories(self) -> list[CategoryCount]:
        return await self._resource_repo.category_counts()
