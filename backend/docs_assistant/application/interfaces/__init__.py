from .embedding_provider import EmbeddingProvider
from .resource_repository import ResourceRepository
from .chunk_repository import ChunkRepository
from .faq_repository import FaqRepository
from .changelog_fetcher import ChangelogFetcher

__all__ = [
    "EmbeddingProvider",
    "ResourceRepository",
    "ChunkRepository",
    "FaqRepository",
    "ChangelogFetcher",
]
