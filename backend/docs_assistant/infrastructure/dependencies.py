"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docs_assistant.config import get_settings
from docs_assistant.application.services import (
    ChangelogService,
    DocumentIndexingService,
    DocumentService,
    EmbeddingGateway,
    FaqCacheService,
    load_seed_file,
    RetrievalService,
)
from docs_assistant.domain.entities import SDKName
from docs_assistant.infrastructure.cache.ttl_cache import TTLCache
from docs_assistant.infrastructure.changelog import GitHubChangelogFetcher
from docs_assistant.infrastructure.crawler.docs_crawler import DocsCrawler
from docs_assistant.infrastructure.database.session import async_session_factory, get_db_session
from docs_assistant.infrastructure.database.repositories import (
    PgChunkRepository,
    SQLAlchemyFaqRepository,
    SQLAlchemyResourceRepository,
)
from docs_assistant.infrastructure.embeddings import OpenAIEmbeddingProvider

logger = logging.getLogger(__name__)


@lru_cache
def get_embedding_gateway() -> EmbeddingGateway:
    """Process-wide embedding gateway; the provider client is stateless."""
    settings = get_settings()
    provider = OpenAIEmbeddingProvider(
        api_key=settings.embedding_api_key,
        base_url=settings.embedding_base_url,
        model=settings.embedding_model,
        model_dimensions=settings.embedding_dimensions,
        timeout=settings.embedding_timeout,
    )
    return EmbeddingGateway(provider)


@lru_cache
def get_changelog_service() -> ChangelogService:
    """Process-wide changelog service so the TTL cache outlives a request."""
    settings = get_settings()
    cache: TTLCache[SDKName, str] = TTLCache(settings.changelog_cache_ttl_seconds)
    fetcher = GitHubChangelogFetcher(timeout=settings.changelog_timeout)
    return ChangelogService(fetcher, cache)


async def get_retrieval_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RetrievalService, None]:
    """Provides a RetrievalService over the pgvector chunk store."""
    settings = get_settings()
    yield RetrievalService(
        get_embedding_gateway(),
        PgChunkRepository(session),
        min_similarity=settings.retrieval_min_similarity,
        limit=settings.retrieval_limit,
    )


async def get_document_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DocumentService, None]:
    """Provides a DocumentService with chunk and resource repositories wired up."""
    yield DocumentService(
        PgChunkRepository(session),
        SQLAlchemyResourceRepository(session),
    )


async def get_faq_cache_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[FaqCacheService, None]:
    """Provides a FaqCacheService with its repository wired up."""
    yield FaqCacheService(
        SQLAlchemyFaqRepository(session),
        default_threshold=get_settings().faq_threshold,
    )


def build_indexing_service(session: AsyncSession) -> DocumentIndexingService:
    return DocumentIndexingService(
        SQLAlchemyResourceRepository(session),
        PgChunkRepository(session),
        get_embedding_gateway(),
    )


@asynccontextmanager
async def indexing_session() -> AsyncIterator[DocumentIndexingService]:
    """Indexing service bound to a fresh session, committed on clean exit.

    Used outside the request cycle (background crawl, CLI), where each
    document gets its own transaction.
    """
    async with async_session_factory() as session:
        try:
            yield build_indexing_service(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def build_docs_crawler() -> DocsCrawler:
    settings = get_settings()
    return DocsCrawler(
        indexing_session,
        base_url=settings.docs_base_url,
        concurrency=settings.crawler_concurrency,
        max_retries=settings.crawler_max_retries,
        retry_delay=settings.crawler_retry_delay,
        batch_delay=settings.crawler_batch_delay,
        timeout=settings.crawler_timeout,
    )


async def seed_faq() -> int:
    """Load curated FAQ entries from the seed file; existing questions are skipped."""
    settings = get_settings()
    seed_path = settings.resolve_path(settings.faq_seed_file)
    if not seed_path.exists():
        logger.debug("No FAQ seed file at %s", seed_path)
        return 0

    entries = load_seed_file(seed_path)
    async with async_session_factory() as session:
        created = await FaqCacheService(SQLAlchemyFaqRepository(session)).seed(entries)
        await session.commit()
    return created
