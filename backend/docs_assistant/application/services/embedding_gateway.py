"""Embedding gateway — single and batched embedding over the EmbeddingProvider port."""

import logging

from docs_assistant.application.interfaces.embedding_provider import EmbeddingProvider

logger = logging.getLogger(__name__)

_MAX_BATCH_SIZE = 50  # Max texts per embedding API call


class EmbeddingGateway:
    """Application service wrapping the external embedding model.

    Provider errors propagate unchanged; retry policy, if any, belongs to
    the provider adapter or the caller.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        *,
        max_batch_size: int = _MAX_BATCH_SIZE,
    ):
        self._provider = embedding_provider
        self._max_batch_size = max_batch_size

    @property
    def dimensions(self) -> int:
        return self._provider.dimensions

    async def embed_one(self, text: str) -> list[float]:
        """Embed a single string; newlines are flattened to spaces first."""
        value = text.replace("\n", " ")
        vectors = await self._provider.generate_embeddings([value])
        return vectors[0]

    async def embed_many(self, texts: list[str]) -> list[list[float]]:
        """Embed many strings, returning exactly one vector per input, in input order."""
        if not texts:
            return []

        vectors: list[list[float]] = []
        for batch_start in range(0, len(texts), self._max_batch_size):
            batch = texts[batch_start : batch_start + self._max_batch_size]
            batch_vectors = await self._provider.generate_embeddings(batch)
            if len(batch_vectors) != len(batch):
                raise ValueError(
                    f"Embedding provider returned {len(batch_vectors)} vectors for {len(batch)} inputs"
                )
            vectors.extend(batch_vectors)

        logger.debug("Embedded %d texts (batch size %d)", len(texts), self._max_batch_size)
        return vectors
