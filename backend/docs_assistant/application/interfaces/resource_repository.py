"""Abstract repository interface (port) for indexed resources."""

from abc import ABC, abstractmethod

from docs_assistant.domain.entities import CategoryCount, Resource


class ResourceRepository(ABC):
    """Port for resource persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, resource: Resource) -> Resource:
        """Persist a new resource and return it with the generated ID."""
        ...

    @abstractmethod
    async def delete(self, resource_id: str) -> bool:
        """Delete a resource and its chunks. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every resource together with its chunks. Returns count of deleted resources."""
        ...

    @abstractmethod
    async def category_counts(self) -> list[CategoryCount]:
        """Return non-null categories with their resource counts, largest first."""
        ...
