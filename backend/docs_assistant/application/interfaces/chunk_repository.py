"""Abstract repository interface (port) for resource chunks and vector search."""

from abc import ABC, abstractmethod

from docs_assistant.domain.entities import (
    ChunkSearchResult,
    ChunkWithProvenance,
    ResourceChunk,
)


class ChunkRepository(ABC):
    """Port for resource chunk persistence and vector search."""

    @abstractmethod
    async def store_chunks(self, chunks: list[ResourceChunk]) -> None:
        """Persist a batch of resource chunks with their embeddings, in list order."""
        ...

    @abstractmethod
    async def delete_by_resource(self, resource_id: str) -> int:
        """Delete all chunks for a resource. Returns count of deleted rows."""
        ...

    @abstractmethod
    async def get_by_resource(self, resource_id: str) -> list[ChunkWithProvenance]:
        """Return every chunk of a resource in ascending id order."""
        ...

    @abstractmethod
    async def search_similar(
        self,
        query_embedding: list[float],
        *,
        categories: list[str] | None = None,
        min_similarity: float = 0.3,
        limit: int = 4,
    ) -> list[ChunkSearchResult]:
        """Find chunks most similar to the query embedding.

        Args:
            query_embedding: The query vector.
            categories: Optional filter — only chunks whose resource category
                is in this list (resources without a category are excluded).
            min_similarity: Exclusive lower bound on cosine similarity.
            limit: Maximum number of results.

        Returns:
            List of ChunkSearchResult ordered by descending similarity.
        """
        ...
