"""Documentation crawler — walks a docs site from its llms.txt and indexes every page.

Pages are discovered breadth-first: llms.txt seeds the queue, and every
markdown page fetched may add further ``.md`` links. Each page is parsed
for its category, title and source URL and then handed to the
DocumentIndexingService inside its own database session, so one bad page
never rolls back the others.
"""

import asyncio
import re
import time
from collections import deque
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field

import httpx
from bs4 import BeautifulSoup
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from docs_assistant.application.services.indexing_service import DocumentIndexingService
from docs_assistant.domain.entities import DocumentProvenance
from docs_assistant.domain.exceptions import DocumentFetchError
from docs_assistant.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("DocsCrawler")

DEFAULT_CATEGORY = "General"

IndexingSessionFactory = Callable[[], AbstractAsyncContextManager[DocumentIndexingService]]

_BREADCRUMB = re.compile(r"Docs › ([^›]+) ›")
_HEADING = re.compile(r"^# (.+)$", re.MULTILINE)
_FRONTMATTER = re.compile(r"\A---[\s\S]*?---\n")
_BLANK_LINES = re.compile(r"^\s*[\r\n]", re.MULTILINE)
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ParsedDocument:
    """A documentation page ready for indexing."""

    content: str
    category: str
    title: str
    source_url: str

    def provenance(self) -> DocumentProvenance:
        return DocumentProvenance(
            category=self.category,
            source_url=self.source_url,
            source_title=self.title,
        )


@dataclass
class CrawlReport:
    """Outcome of one crawl run."""

    discovered: int = 0
    indexed: int = 0
    failed: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0


# ── Parsing helpers ──────────────────────────────────────────────────


def extract_md_links(content: str, base_url: str) -> list[str]:
    """Return unique ``.md`` URLs under ``base_url``, in order of first appearance.

    Both markdown links ``[text](url)`` and bare URLs are recognised.
    """
    base = re.escape(base_url.rstrip("/"))
    markdown_links = re.compile(r"\[[^\]]+\]\((" + base + r"[^)]+\.md)\)")
    plain_urls = re.compile(base + r"/[^\s)\]]+\.md")

    links: dict[str, None] = {}
    for match in markdown_links.finditer(content):
        links.setdefault(match.group(1))
    for match in plain_urls.finditer(content):
        links.setdefault(match.group(0))
    return list(links)


def strip_html(page: str) -> str:
    """Reduce an HTML page to its visible text, preferring the #main-content div."""
    soup = BeautifulSoup(page, "html.parser")

    for tag in soup(["script", "style", "nav", "header", "footer"]):
        tag.decompose()

    content = soup.find(id="main-content") or soup.body or soup
    text = content.get_text(" ", strip=True).replace("\xa0", " ")
    return _WHITESPACE.sub(" ", text).strip()


def title_from_url(url: str) -> str:
    slug = url.rstrip("/").rsplit("/", 1)[-1]
    slug = re.sub(r"\.md$", "", slug)
    return re.sub(r"[-_]", " ", slug)


def parse_markdown(url: str, content: str) -> ParsedDocument:
    """Pull category, title and cleaned body out of a fetched docs page."""
    breadcrumb = _BREADCRUMB.search(content)
    category = breadcrumb.group(1).strip() if breadcrumb else DEFAULT_CATEGORY

    heading = _HEADING.search(content)
    title = heading.group(1).strip() if heading else title_from_url(url)

    cleaned = _FRONTMATTER.sub("", content, count=1)
    cleaned = _BLANK_LINES.sub("", cleaned).strip()

    return ParsedDocument(
        content=cleaned,
        category=category,
        title=title,
        source_url=re.sub(r"\.md$", "", url),
    )


# ── Crawler ──────────────────────────────────────────────────────────


class DocsCrawler:
    """Breadth-first crawler that re-indexes a documentation site from scratch."""

    def __init__(
        self,
        indexing_session: IndexingSessionFactory,
        *,
        base_url: str = "https://docs.livekit.io",
        concurrency: int = 10,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        batch_delay: float = 0.2,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self._indexing_session = indexing_session
        self._base_url = base_url.rstrip("/")
        self._concurrency = concurrency
        self._max_retries = max(1, max_retries)
        self._retry_delay = retry_delay
        self._batch_delay = batch_delay
        self._timeout = timeout
        self._http_client = http_client

    async def run(self) -> CrawlReport:
        """Clear the index, then crawl from llms.txt until the queue is empty."""
        start = time.monotonic()
        report = CrawlReport()
        owns_client = self._http_client is None
        client = self._http_client or httpx.AsyncClient(
            timeout=self._timeout, follow_redirects=True
        )

        plog.separator("Docs crawl")
        try:
            async with self._indexing_session() as service:
                await service.clear_index()

            llms_url = f"{self._base_url}/llms.txt"
            with plog.timed_step(PipelineStage.FETCH, f"Fetching {llms_url}"):
                llms = await self.fetch(client, llms_url)

            queue: deque[str] = deque(extract_md_links(llms, self._base_url))
            seen: set[str] = set(queue)
            report.discovered = len(queue)
            plog.step_start(PipelineStage.CRAWL, f"Found {len(queue)} pages in llms.txt")

            while queue:
                batch = [queue.popleft() for _ in range(min(self._concurrency, len(queue)))]
                plog.step_start(
                    PipelineStage.CRAWL,
                    f"Processing batch of {len(batch)}",
                    done=report.indexed + len(report.failed),
                    pending=len(queue),
                )
                outcomes = await asyncio.gather(*(self._process(client, url) for url in batch))

                for url, (indexed, links) in zip(batch, outcomes):
                    if indexed:
                        report.indexed += 1
                    else:
                        report.failed.append(url)
                    for link in links:
                        if link not in seen:
                            seen.add(link)
                            queue.append(link)
                            report.discovered += 1
                            plog.detail(f"New link: {link}")

                if queue and self._batch_delay > 0:
                    await asyncio.sleep(self._batch_delay)
        finally:
            if owns_client:
                await client.aclose()

        report.duration_seconds = round(time.monotonic() - start, 2)
        plog.step_complete(
            PipelineStage.COMPLETE,
            "Docs crawl finished",
            indexed=report.indexed,
            failed=len(report.failed),
            seconds=report.duration_seconds,
        )
        return report

    async def fetch(self, client: httpx.AsyncClient, url: str) -> str:
        """GET ``url`` with linear-backoff retries; the last error is re-raised."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_incrementing(start=self._retry_delay, increment=self._retry_delay),
            retry=retry_if_exception_type((httpx.HTTPError, DocumentFetchError)),
            before_sleep=self._log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                text = await self._fetch_once(client, url)
        return text

    async def _fetch_once(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(url)

        # Some pages only exist as HTML; retry the same path without .md
        if response.status_code == 404 and url.endswith(".md"):
            html_url = re.sub(r"\.md$", "", url)
            plog.detail(f".md not found, trying HTML page {html_url}")
            html_response = await client.get(html_url)
            if not html_response.is_success:
                raise DocumentFetchError(html_url, f"HTTP {html_response.status_code}")
            return strip_html(html_response.text)

        if not response.is_success:
            raise DocumentFetchError(url, f"HTTP {response.status_code}")
        return response.text

    async def _process(self, client: httpx.AsyncClient, url: str) -> tuple[bool, list[str]]:
        """Fetch, parse and index one page; returns (indexed, discovered links)."""
        try:
            content = await self.fetch(client, url)
        except (httpx.HTTPError, DocumentFetchError) as e:
            plog.step_error(PipelineStage.FETCH, f"Giving up on {url}", error=e)
            return False, []

        links = extract_md_links(content, self._base_url)
        document = parse_markdown(url, content)

        try:
            async with self._indexing_session() as service:
                await service.index_document(document.content, document.provenance())
        except Exception as e:
            plog.step_error(PipelineStage.ERROR, f"Failed to index {url}", error=e)
            return False, links

        plog.step_complete(PipelineStage.STORE, f"{document.category} - {document.title}")
        return True, links

    @staticmethod
    def _log_retry(state: RetryCallState) -> None:
        error = state.outcome.exception() if state.outcome else None
        plog.step_warning(
            PipelineStage.FETCH,
            f"Retry {state.attempt_number} after {type(error).__name__}: {error}",
        )
