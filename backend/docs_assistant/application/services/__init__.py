from .text_chunker import chunk_text, split_text
from .embedding_gateway import EmbeddingGateway
from .indexing_service import DocumentIndexingService
from .retrieval_service import RetrievalService, merge_unique_results
from .document_service import DocumentService
from .faq_cache_service import FaqCacheService, load_seed_file
from .changelog_service import ChangelogService

__all__ = [
    "chunk_text",
    "split_text",
    "EmbeddingGateway",
    "DocumentIndexingService",
    "RetrievalService",
    "merge_unique_results",
    "DocumentService",
    "FaqCacheService",
    "load_seed_file",
    "ChangelogService",
]
