"""Indexing API controller — triggers a full documentation re-crawl."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status

from docs_assistant.application.schemas import IndexingStartedResponse
from docs_assistant.infrastructure.crawler.docs_crawler import DocsCrawler
from docs_assistant.infrastructure.dependencies import build_docs_crawler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Indexing"])


async def _run_crawl(crawler: DocsCrawler) -> None:
    try:
        report = await crawler.run()
    except Exception:
        logger.exception("Documentation indexing failed")
        return
    logger.info(
        "Documentation indexing finished: %d indexed, %d failed",
        report.indexed,
        len(report.failed),
    )


@router.post(
    "/index-docs",
    response_model=IndexingStartedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def index_docs(
    background_tasks: BackgroundTasks,
    crawler: DocsCrawler = Depends(build_docs_crawler),
) -> IndexingStartedResponse:
    """Clear the index and re-crawl the documentation site in the background."""
    background_tasks.add_task(_run_crawl, crawler)
    return IndexingStartedResponse(message="Documentation indexing started in the background")
