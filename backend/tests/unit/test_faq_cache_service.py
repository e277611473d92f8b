"""Unit tests for the FAQ fuzzy cache."""

from pathlib import Path

import pytest

from docs_assistant.application.interfaces import FaqRepository
from docs_assistant.application.services import FaqCacheService, load_seed_file
from docs_assistant.application.services.faq_cache_service import (
    FAQ_HINT_THRESHOLD,
    levenshtein,
    normalized_levenshtein,
)
from docs_assistant.domain.entities import FaqEntry

from fakes import FakeFaqRepository

SEED_FILE = Path(__file__).resolve().parents[2] / "data" / "faq_seed.yaml"


class BrokenFaqRepository(FaqRepository):
    async def get_all(self) -> list[FaqEntry]:
        raise ConnectionError("database is down")

    async def create(self, entry: FaqEntry) -> FaqEntry:
        raise ConnectionError("database is down")

    async def record_hit(self, entry_id: str) -> None:
        raise ConnectionError("database is down")


@pytest.fixture
def repo() -> FakeFaqRepository:
    return FakeFaqRepository([
        FaqEntry(question="how to mute audio", answer="Use setMicrophoneEnabled(false).", category="Audio"),
        FaqEntry(question="how to join a room", answer="Use room.connect(url, token).", category="Connection"),
    ])


@pytest.fixture
def service(repo) -> FaqCacheService:
    return FaqCacheService(repo)


def test_levenshtein_basics():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("same", "same") == 0


def test_normalized_distance_ignores_case_and_padding():
    assert normalized_levenshtein("  How To Mute Audio ", "how to mute audio") == 0.0


def test_normalized_distance_of_empty_strings_is_zero():
    assert normalized_levenshtein("", "   ") == 0.0


def test_normalized_distance_is_bounded():
    assert normalized_levenshtein("abc", "xyz") == 1.0


@pytest.mark.asyncio
async def test_exact_match_returns_full_similarity_and_counts_hit(service, repo):
    match = await service.search("How to mute audio")

    assert match is not None
    assert match.question == "how to mute audio"
    assert match.similarity == 1.0
    assert repo.entries[0].hits == 1
    assert repo.entries[1].hits == 0


@pytest.mark.asyncio
async def test_close_paraphrase_matches(service):
    match = await service.search("how to mute the audio")
    assert match is not None
    assert match.answer == "Use setMicrophoneEnabled(false)."
    assert 0.7 <= match.similarity < 1.0


@pytest.mark.asyncio
async def test_match_stamps_last_used(service, repo):
    assert repo.entries[0].last_used is None

    await service.search("how to mute audio")

    assert repo.entries[0].last_used is not None
    assert repo.entries[1].last_used is None


@pytest.mark.asyncio
async def test_unrelated_query_misses(service, repo):
    assert await service.search("what is the pricing for egress") is None
    assert all(e.hits == 0 for e in repo.entries)
    assert all(e.last_used is None for e in repo.entries)


@pytest.mark.asyncio
async def test_threshold_boundary():
    repo = FakeFaqRepository([FaqEntry(question="a" * 100, answer="A")])
    service = FaqCacheService(repo)
    query = "a" * 69 + "b" * 31   # distance 0.31

    assert await service.search(query, threshold=0.3) is None
    match = await service.search(query, threshold=FAQ_HINT_THRESHOLD)
    assert match is not None
    assert match.similarity == pytest.approx(0.69)


@pytest.mark.asyncio
async def test_omitted_threshold_uses_service_default():
    repo = FakeFaqRepository([FaqEntry(question="a" * 100, answer="A")])
    query = "a" * 69 + "b" * 31   # distance 0.31

    assert await FaqCacheService(repo).search(query) is None
    lenient = FaqCacheService(repo, default_threshold=FAQ_HINT_THRESHOLD)
    assert await lenient.search(query) is not None
    assert await lenient.search(query, threshold=0.3) is None


@pytest.mark.asyncio
async def test_best_match_wins_and_ties_keep_first():
    repo = FakeFaqRepository([
        FaqEntry(question="abcd", answer="first"),
        FaqEntry(question="abce", answer="second"),
        FaqEntry(question="abcx", answer="third"),
    ])
    service = FaqCacheService(repo)

    tie = await service.search("abcz", threshold=0.5)
    assert tie.answer == "first"

    exact = await service.search("abcx", threshold=0.5)
    assert exact.answer == "third"


@pytest.mark.asyncio
async def test_empty_table_returns_none():
    assert await FaqCacheService(FakeFaqRepository()).search("anything") is None


@pytest.mark.asyncio
async def test_storage_errors_are_reported_as_no_match():
    assert await FaqCacheService(BrokenFaqRepository()).search("how to mute audio") is None


@pytest.mark.asyncio
async def test_add_faq_makes_entry_searchable(service):
    await service.add_faq("what are agents", "Programmable participants.", "Agents")
    match = await service.search("What are agents?")
    assert match is not None
    assert match.answer == "Programmable participants."


@pytest.mark.asyncio
async def test_seed_skips_existing_questions(service, repo):
    created = await service.seed([
        FaqEntry(question="How to mute audio ", answer="duplicate"),
        FaqEntry(question="what is a track", answer="A media stream."),
        FaqEntry(question="what is a track", answer="duplicate in batch"),
    ])

    assert created == 1
    assert [e.question for e in repo.entries][-1] == "what is a track"
    assert len(repo.entries) == 3


def test_seed_file_loads_curated_entries():
    entries = load_seed_file(SEED_FILE)
    assert len(entries) == 10
    assert entries[0].question == "how to mute audio"
    assert entries[0].category == "Audio"
    assert all(e.answer for e in entries)


def test_seed_file_skips_incomplete_items(tmp_path):
    seed = tmp_path / "faq.yaml"
    seed.write_text(
        "faqs:\n"
        "  - question: what is a room\n"
        "    answer: A virtual space.\n"
        "  - question: missing answer\n",
        encoding="utf-8",
    )
    entries = load_seed_file(seed)
    assert [e.question for e in entries] == ["what is a room"]
