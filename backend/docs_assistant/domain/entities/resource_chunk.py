"""Domain entities for resource chunks — text fragments with vector embeddings."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class TextChunk:
    """A segment produced by the chunker, before it is embedded."""

    content: str
    position: int
    has_code: bool = False
    language: str | None = None


@dataclass
class ResourceChunk:
    """A text chunk from an indexed resource, suitable for vector search.

    Chunks of one resource are stored in their original order; the
    autoincrement ``id`` assigned on insert preserves that order.
    """

    resource_id: str
    chunk_index: int
    content: str
    embedding: list[float] = field(default_factory=list)
    has_code: bool = False
    language: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ChunkSearchResult:
    """A single chunk returned by semantic retrieval, with resource provenance."""

    content: str
    similarity: float  # 1 - cosine distance
    resource_id: str | None
    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None
    chunk_id: int | None = None


@dataclass
class ChunkWithProvenance:
    """A stored chunk joined with its owning resource's provenance."""

    id: int
    resource_id: str
    content: str
    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None


@dataclass
class FullDocument:
    """A resource reassembled from all of its chunks."""

    resource_id: str
    content: str
    chunk_count: int
    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None
