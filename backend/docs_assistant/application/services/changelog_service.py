"""Changelog service — cached access to SDK release notes."""

import logging

from docs_assistant.application.interfaces.changelog_fetcher import ChangelogFetcher
from docs_assistant.domain.entities import SDK_SOURCES, Changelog, SDKName, SDKSource
from docs_assistant.domain.exceptions import ChangelogUnavailableError
from docs_assistant.infrastructure.cache.ttl_cache import TTLCache

logger = logging.getLogger(__name__)


class ChangelogService:
    """Fetches SDK changelogs through a TTL cache, serving stale data on failure."""

    def __init__(
        self,
        fetcher: ChangelogFetcher,
        cache: TTLCache[SDKName, str],
        sources: dict[SDKName, SDKSource] | None = None,
    ):
        self._fetcher = fetcher
        self._cache = cache
        self._sources = sources or SDK_SOURCES

    def available_sdks(self) -> list[SDKName]:
        return list(self._sources)

    async def fetch(self, sdk: SDKName) -> Changelog:
        """Return the changelog for ``sdk``.

        Raises ChangelogUnavailableError when the download fails and no
        cached copy (fresh or stale) exists.
        """
        source = self._sources[sdk]

        cached = self._cache.get(sdk)
        if cached is not None:
            logger.debug("Using cached changelog for %s", sdk.value)
            return Changelog(sdk=sdk, link=source.url, content=cached)

        try:
            content = await self._fetcher.fetch(source)
        except Exception as exc:
            stale = self._cache.get_stale(sdk)
            if stale is not None:
                logger.warning("Changelog refresh failed for %s, serving stale copy: %s", sdk.value, exc)
                return Changelog(sdk=sdk, link=source.url, content=stale)
            logger.error("Failed to fetch changelog for %s: %s", sdk.value, exc)
            raise ChangelogUnavailableError(sdk.value) from exc

        self._cache.set(sdk, content)
        return Changelog(sdk=sdk, link=source.url, content=content)

    def clear_cache(self, sdk: SDKName | None = None) -> None:
        if sdk is None:
            self._cache.clear()
        else:
            self._cache.delete(sdk)
