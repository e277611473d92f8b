"""FAQ cache service — fuzzy lookup of curated question/answer pairs.

The cache is consulted before semantic retrieval. Matching uses normalized
Levenshtein distance over lowercased, trimmed strings:

    distance = edit_distance(a, b) / max(len(a), len(b))

so 0.0 means identical and 1.0 means nothing in common. A lookup is a full
scan of the table, which is fine for the tens-to-hundreds of curated entries
it is meant to hold.
"""

import logging
from pathlib import Path

import yaml

from docs_assistant.application.interfaces import FaqRepository
from docs_assistant.domain.entities import FaqEntry, FaqMatch

logger = logging.getLogger(__name__)

FAQ_CONFIDENT_THRESHOLD = 0.3  # 70% similarity, answer can be served directly
FAQ_HINT_THRESHOLD = 0.5       # 50% similarity, a hint only


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance (insert, delete, substitute — each cost 1)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            ))
        previous = current
    return previous[-1]


def normalized_levenshtein(a: str, b: str) -> float:
    """Edit distance of the normalized strings divided by the longer length."""
    s1 = a.lower().strip()
    s2 = b.lower().strip()
    longest = max(len(s1), len(s2))
    if longest == 0:
        return 0.0
    return levenshtein(s1, s2) / longest


class FaqCacheService:
    """Best-effort FAQ accelerator — never fails the caller's request."""

    def __init__(
        self,
        repository: FaqRepository,
        default_threshold: float = FAQ_CONFIDENT_THRESHOLD,
    ):
        self._repository = repository
        self._default_threshold = default_threshold

    async def search(
        self,
        query: str,
        threshold: float | None = None,
    ) -> FaqMatch | None:
        """Return the closest FAQ entry within ``threshold``, recording the hit.

        ``threshold`` falls back to the service default when omitted. Ties
        keep the first entry found. Storage errors are logged and reported as
        "no match".
        """
        if threshold is None:
            threshold = self._default_threshold
        try:
            entries = await self._repository.get_all()

            best: FaqEntry | None = None
            best_distance = 0.0
            for entry in entries:
                distance = normalized_levenshtein(query, entry.question)
                if distance <= threshold and (best is None or distance < best_distance):
                    best = entry
                    best_distance = distance

            if best is None:
                return None

            await self._repository.record_hit(best.id)
            logger.info(
                "FAQ cache hit: %r → %r (similarity=%.2f)",
                query[:80], best.question, 1 - best_distance,
            )
            return FaqMatch(
                question=best.question,
                answer=best.answer,
                similarity=1 - best_distance,
            )
        except Exception:
            logger.exception("FAQ cache search failed")
            return None

    async def add_faq(
        self,
        question: str,
        answer: str,
        category: str | None = None,
    ) -> FaqEntry:
        return await self._repository.create(
            FaqEntry(question=question, answer=answer, category=category)
        )

    async def seed(self, entries: list[FaqEntry]) -> int:
        """Insert entries whose question is not present yet. Returns count inserted."""
        existing = {e.question.lower().strip() for e in await self._repository.get_all()}
        created = 0
        for entry in entries:
            key = entry.question.lower().strip()
            if key in existing:
                continue
            await self._repository.create(entry)
            existing.add(key)
            created += 1
        logger.info("Seeded %d FAQ entries (%d already present)", created, len(entries) - created)
        return created


def load_seed_file(path: str | Path) -> list[FaqEntry]:
    """Read FAQ seed entries from a YAML file with a top-level ``faqs`` list."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries: list[FaqEntry] = []
    for item in data.get("faqs", []):
        question = str(item.get("question", "")).strip()
        answer = str(item.get("answer", "")).strip()
        if not question or not answer:
            logger.warning("Skipping incomplete FAQ seed entry: %s", item)
            continue
        entries.append(FaqEntry(question=question, answer=answer, category=item.get("category")))
    return entries
