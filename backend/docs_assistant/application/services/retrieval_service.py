"""Retrieval service — semantic search over stored documentation chunks."""

import asyncio
import logging
from collections.abc import Iterable

from docs_assistant.application.interfaces import ChunkRepository
from docs_assistant.application.services.embedding_gateway import EmbeddingGateway
from docs_assistant.domain.entities import ChunkSearchResult

logger = logging.getLogger(__name__)

DEFAULT_MIN_SIMILARITY = 0.3
DEFAULT_LIMIT = 4


class RetrievalService:
    """Finds the chunks most relevant to a query by cosine similarity.

    The heavy lifting (distance computation, category join, ordering) is
    pushed into the ChunkRepository; the service re-applies the similarity
    floor, ordering and result cap so the guarantees hold for any store.
    """

    def __init__(
        self,
        embedding_gateway: EmbeddingGateway,
        chunk_repository: ChunkRepository,
        *,
        min_similarity: float = DEFAULT_MIN_SIMILARITY,
        limit: int = DEFAULT_LIMIT,
    ):
        self._embeddings = embedding_gateway
        self._chunk_repo = chunk_repository
        self._min_similarity = min_similarity
        self._limit = limit

    async def find_relevant(
        self,
        query: str,
        categories: Iterable[str] | None = None,
    ) -> list[ChunkSearchResult]:
        """Return at most ``limit`` chunks above the similarity floor, best first."""
        if not query or not query.strip():
            return []

        category_filter = sorted(set(categories)) if categories else None
        query_embedding = await self._embeddings.embed_one(query)

        rows = await self._chunk_repo.search_similar(
            query_embedding,
            categories=category_filter,
            min_similarity=self._min_similarity,
            limit=self._limit,
        )

        results = [r for r in rows if r.similarity > self._min_similarity]
        if category_filter:
            results = [r for r in results if r.category in category_filter]
        results.sort(key=_ranking_key)

        logger.debug(
            "find_relevant query=%r categories=%s → %d result(s)",
            query[:80],
            category_filter,
            len(results[: self._limit]),
        )
        return results[: self._limit]

    async def find_relevant_many(
        self,
        queries: Iterable[str],
        categories: Iterable[str] | None = None,
    ) -> list[ChunkSearchResult]:
        """Run several paraphrased queries concurrently and merge their results."""
        category_list = list(categories) if categories else None
        batches = await asyncio.gather(
            *(self.find_relevant(q, category_list) for q in queries)
        )
        return merge_unique_results(batches)


def merge_unique_results(
    batches: Iterable[Iterable[ChunkSearchResult]],
) -> list[ChunkSearchResult]:
    """Flatten result lists, keeping the first hit per resource (or per content)."""
    seen: set[str] = set()
    merged: list[ChunkSearchResult] = []
    for batch in batches:
        for result in batch:
            key = result.resource_id or f"content:{result.content}"
            if key in seen:
                continue
            seen.add(key)
            merged.append(result)
    return merged


def _ranking_key(result: ChunkSearchResult) -> tuple[float, str, int]:
    return (-result.similarity, result.resource_id or "", result.chunk_id or 0)
