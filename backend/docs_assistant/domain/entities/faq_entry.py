"""Domain entities for the curated FAQ cache."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class FaqEntry:
    """A curated question/answer pair used as a shortcut before retrieval."""

    question: str
    answer: str
    category: str | None = None
    hits: int = 0
    last_used: datetime | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class FaqMatch:
    """Best FAQ entry for a query; similarity is ``1 - normalized distance``."""

    question: str
    answer: str
    similarity: float
