"""Abstract interface (port) for downloading SDK release notes."""

from abc import ABC, abstractmethod

from docs_assistant.domain.entities import SDKSource


class ChangelogFetcher(ABC):
    """Port for fetching and formatting one SDK's changelog."""

    @abstractmethod
    async def fetch(self, source: SDKSource) -> str:
        """Download ``source`` and return it as formatted plain text.

        Raises on network or HTTP errors.
        """
        ...
