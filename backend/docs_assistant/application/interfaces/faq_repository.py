"""Abstract repository interface (port) for FAQ entries."""

from abc import ABC, abstractmethod

from docs_assistant.domain.entities import FaqEntry


class FaqRepository(ABC):
    """Port for FAQ persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_all(self) -> list[FaqEntry]:
        """Retrieve every FAQ entry in the store's natural order."""
        ...

    @abstractmethod
    async def create(self, entry: FaqEntry) -> FaqEntry:
        """Persist a new FAQ entry and return it with the generated ID."""
        ...

    @abstractmethod
    async def record_hit(self, entry_id: str) -> None:
        """Atomically increment ``hits`` and set ``last_used`` to now."""
        ...
