from .resource import Resource, DocumentProvenance, CategoryCount
from .resource_chunk import (
    TextChunk,
    ResourceChunk,
    ChunkSearchResult,
    ChunkWithProvenance,
    FullDocument,
)
from .faq_entry import FaqEntry, FaqMatch
from .changelog import (
    Changelog,
    ChangelogSourceType,
    SDKName,
    SDKSource,
    SDK_SOURCES,
)

__all__ = [
    "Resource",
    "DocumentProvenance",
    "CategoryCount",
    "TextChunk",
    "ResourceChunk",
    "ChunkSearchResult",
    "ChunkWithProvenance",
    "FullDocument",
    "FaqEntry",
    "FaqMatch",
    "Changelog",
    "ChangelogSourceType",
    "SDKName",
    "SDKSource",
    "SDK_SOURCES",
]
