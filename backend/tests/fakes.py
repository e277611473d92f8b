"""In-memory fakes for the repository and embedding ports."""

import math
import string
import uuid
from datetime import datetime, timezone

from docs_assistant.application.interfaces import (
    ChunkRepository,
    EmbeddingProvider,
    FaqRepository,
    ResourceRepository,
)
from docs_assistant.domain.entities import (
    CategoryCount,
    ChunkSearchResult,
    ChunkWithProvenance,
    FaqEntry,
    Resource,
    ResourceChunk,
)


def letter_vector(text: str) -> list[float]:
    """Bag-of-letters embedding: similar wording gives similar vectors."""
    lowered = text.lower()
    return [float(lowered.count(ch)) for ch in string.ascii_lowercase]


def cosine_similarity(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


class FakeEmbeddingProvider(EmbeddingProvider):
    """Deterministic provider; explicit vectors override the letter-count default."""

    def __init__(self, vectors: dict[str, list[float]] | None = None):
        self.vectors = vectors or {}
        self.calls: list[list[str]] = []

    @property
    def dimensions(self) -> int:
        return len(string.ascii_lowercase)

    async def generate_embeddings(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [self.vectors.get(t, letter_vector(t)) for t in texts]


class InMemoryIndex:
    """State shared by the fake resource and chunk repositories."""

    def __init__(self):
        self.resources: dict[str, Resource] = {}
        self.chunks: list[ResourceChunk] = []
        self.next_chunk_id = 1


class FakeResourceRepository(ResourceRepository):
    def __init__(self, index: InMemoryIndex):
        self._index = index

    async def create(self, resource: Resource) -> Resource:
        resource.id = resource.id or str(uuid.uuid4())
        self._index.resources[resource.id] = resource
        return resource

    async def delete(self, resource_id: str) -> bool:
        if resource_id not in self._index.resources:
            return False
        del self._index.resources[resource_id]
        self._index.chunks = [c for c in self._index.chunks if c.resource_id != resource_id]
        return True

    async def delete_all(self) -> int:
        count = len(self._index.resources)
        self._index.resources.clear()
        self._index.chunks.clear()
        return count

    async def category_counts(self) -> list[CategoryCount]:
        counts: dict[str, int] = {}
        for resource in self._index.resources.values():
            if resource.category is not None:
                counts[resource.category] = counts.get(resource.category, 0) + 1
        ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [CategoryCount(name=name, count=count) for name, count in ordered]


class FakeChunkRepository(ChunkRepository):
    def __init__(self, index: InMemoryIndex):
        self._index = index

    async def store_chunks(self, chunks: list[ResourceChunk]) -> None:
        for chunk in chunks:
            chunk.id = self._index.next_chunk_id
            self._index.next_chunk_id += 1
            self._index.chunks.append(chunk)

    async def delete_by_resource(self, resource_id: str) -> int:
        before = len(self._index.chunks)
        self._index.chunks = [c for c in self._index.chunks if c.resource_id != resource_id]
        return before - len(self._index.chunks)

    async def get_by_resource(self, resource_id: str) -> list[ChunkWithProvenance]:
        resource = self._index.resources.get(resource_id)
        if resource is None:
            return []
        chunks = sorted(
            (c for c in self._index.chunks if c.resource_id == resource_id),
            key=lambda c: c.id,
        )
        return [
            ChunkWithProvenance(
                id=c.id,
                resource_id=c.resource_id,
                content=c.content,
                category=resource.category,
                source_url=resource.source_url,
                source_title=resource.source_title,
            )
            for c in chunks
        ]

    async def search_similar(
        self,
        query_embedding: list[float],
        *,
        categories: list[str] | None = None,
        min_similarity: float = 0.3,
        limit: int = 4,
    ) -> list[ChunkSearchResult]:
        results = []
        for chunk in self._index.chunks:
            resource = self._index.resources.get(chunk.resource_id)
            category = resource.category if resource else None
            if categories and category not in categories:
                continue
            similarity = cosine_similarity(chunk.embedding, query_embedding)
            if similarity <= min_similarity:
                continue
            results.append(
                ChunkSearchResult(
                    content=chunk.content,
                    similarity=similarity,
                    resource_id=chunk.resource_id,
                    category=category,
                    source_url=resource.source_url if resource else None,
                    source_title=resource.source_title if resource else None,
                    chunk_id=chunk.id,
                )
            )
        results.sort(key=lambda r: (-r.similarity, r.resource_id or "", r.chunk_id or 0))
        return results[:limit]


class FakeFaqRepository(FaqRepository):
    def __init__(self, entries: list[FaqEntry] | None = None):
        self.entries: list[FaqEntry] = []
        for entry in entries or []:
            entry.id = entry.id or str(uuid.uuid4())
            self.entries.append(entry)

    async def get_all(self) -> list[FaqEntry]:
        return list(self.entries)

    async def create(self, entry: FaqEntry) -> FaqEntry:
        entry.id = entry.id or str(uuid.uuid4())
        self.entries.append(entry)
        return entry

    async def record_hit(self, entry_id: str) -> None:
        for entry in self.entries:
            if entry.id == entry_id:
                entry.hits += 1
                entry.last_used = datetime.now(timezone.utc)

