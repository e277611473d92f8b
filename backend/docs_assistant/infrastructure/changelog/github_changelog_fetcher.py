"""GitHub changelog fetcher — downloads CHANGELOG.md files and releases Atom feeds."""

import logging

import defusedxml.ElementTree as ET
import httpx
from bs4 import BeautifulSoup

from docs_assistant.application.interfaces.changelog_fetcher import ChangelogFetcher
from docs_assistant.domain.entities import ChangelogSourceType, SDKSource

logger = logging.getLogger(__name__)

MAX_CHANGELOG_LINES = 1000
MAX_RELEASES = 20

_ATOM_NS = {"atom": "http://www.w3.org/2005/Atom"}


def tail_changelog(raw: str, max_lines: int = MAX_CHANGELOG_LINES) -> str:
    """Keep the last ``max_lines`` lines of a CHANGELOG.md."""
    return "\n".join(raw.split("\n")[-max_lines:])


def parse_releases_atom(xml: str, max_releases: int = MAX_RELEASES) -> str:
    """Render a GitHub releases Atom feed as ``## <version> (<date>)`` blocks."""
    root = ET.fromstring(xml)

    entries: list[str] = []
    for entry in root.findall("atom:entry", _ATOM_NS)[:max_releases]:
        title = entry.findtext("atom:title", namespaces=_ATOM_NS)
        title = title.strip().replace("Release ", "") if title else "Unknown Version"

        updated = entry.findtext("atom:updated", default="", namespaces=_ATOM_NS)
        date = updated.strip().split("T")[0]

        # Release notes arrive as escaped HTML inside <content type="html">
        body = entry.findtext("atom:content", default="", namespaces=_ATOM_NS)
        content = BeautifulSoup(body, "html.parser").get_text("\n", strip=True)

        entries.append(f"## {title} ({date})\n{content}\n")

    return "\n---\n\n".join(entries)


class GitHubChangelogFetcher(ChangelogFetcher):
    """Infrastructure adapter — fetches release notes over HTTP with httpx."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._http_client = http_client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def fetch(self, source: SDKSource) -> str:
        client = await self._get_client()
        should_close = self._http_client is None
        try:
            response = await client.get(source.url)
            response.raise_for_status()
            raw = response.text
        finally:
            if should_close:
                await client.aclose()

        if source.type == ChangelogSourceType.RELEASES_ATOM:
            formatted = parse_releases_atom(raw)
            logger.info("Parsed releases Atom feed from %s", source.url)
        else:
            formatted = tail_changelog(raw)
            logger.info("Fetched %d lines from %s", raw.count("\n") + 1, source.url)
        return formatted
