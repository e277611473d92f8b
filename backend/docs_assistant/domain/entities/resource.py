"""Domain entity for indexed documentation resources."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class DocumentProvenance:
    """Where an indexed document came from — carried onto every search hit."""

    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None


@dataclass
class Resource:
    """Core domain entity: one ingested source document.

    A *Resource* holds the full normalized text of a documentation page.
    It is created once per indexing pass and never mutated afterwards;
    a re-index deletes it (and its chunks) and creates a fresh record.
    """

    content: str
    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_provenance(cls, content: str, provenance: DocumentProvenance) -> "Resource":
        return cls(
            content=content,
            category=provenance.category,
            source_url=provenance.source_url,
            source_title=provenance.source_title,
        )


@dataclass
class CategoryCount:
    """Number of resources indexed under one category."""

    name: str
    count: int
