"""API tests — controllers wired to in-memory services via dependency overrides."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from docs_assistant.application.interfaces import ChangelogFetcher
from docs_assistant.application.services import (
    ChangelogService,
    DocumentService,
    EmbeddingGateway,
    FaqCacheService,
    RetrievalService,
)
from docs_assistant.domain.entities import FaqEntry, Resource, ResourceChunk, SDKSource
from docs_assistant.infrastructure.cache.ttl_cache import TTLCache
from docs_assistant.infrastructure.crawler.docs_crawler import CrawlReport
from docs_assistant.infrastructure.dependencies import (
    build_docs_crawler,
    get_changelog_service,
    get_document_service,
    get_faq_cache_service,
    get_retrieval_service,
)
from docs_assistant.main import app

from fakes import (
    FakeChunkRepository,
    FakeEmbeddingProvider,
    FakeFaqRepository,
    FakeResourceRepository,
    InMemoryIndex,
)


class StaticFetcher(ChangelogFetcher):
    def __init__(self):
        self.fail = False

    async def fetch(self, source: SDKSource) -> str:
        if self.fail:
            raise ConnectionError("github unreachable")
        return "## 1.2.0\n- Added data tracks"


class RecordingCrawler:
    def __init__(self):
        self.runs = 0

    async def run(self) -> CrawlReport:
        self.runs += 1
        return CrawlReport(discovered=1, indexed=1)


@pytest_asyncio.fixture
async def seeded_index() -> InMemoryIndex:
    index = InMemoryIndex()
    resources = FakeResourceRepository(index)
    chunks = FakeChunkRepository(index)
    provider = FakeEmbeddingProvider()

    for resource_id, category, texts in [
        ("res-rooms", "Home", ["Rooms hold participants", "Rooms close when empty"]),
        ("res-agents", "Agents", ["Agents join rooms as participants"]),
    ]:
        await resources.create(Resource(
            id=resource_id,
            content="\n\n".join(texts),
            category=category,
            source_url=f"https://docs.livekit.io/{resource_id}",
            source_title=category,
        ))
        vectors = await provider.generate_embeddings(texts)
        await chunks.store_chunks([
            ResourceChunk(resource_id=resource_id, chunk_index=i, content=t, embedding=v)
            for i, (t, v) in enumerate(zip(texts, vectors))
        ])
    return index


@pytest.fixture
def faq_repo() -> FakeFaqRepository:
    return FakeFaqRepository([
        FaqEntry(question="how to join a room", answer="Use room.connect(url, token).", category="Connection"),
    ])


@pytest.fixture
def fetcher() -> StaticFetcher:
    return StaticFetcher()


@pytest.fixture
def crawler() -> RecordingCrawler:
    return RecordingCrawler()


@pytest_asyncio.fixture
async def client(seeded_index, faq_repo, fetcher, crawler):
    gateway = EmbeddingGateway(FakeEmbeddingProvider())
    changelog_service = ChangelogService(fetcher, TTLCache(3600))

    async def retrieval_override():
        yield RetrievalService(gateway, FakeChunkRepository(seeded_index))

    async def documents_override():
        yield DocumentService(FakeChunkRepository(seeded_index), FakeResourceRepository(seeded_index))

    async def faq_override():
        yield FaqCacheService(faq_repo)

    app.dependency_overrides[get_retrieval_service] = retrieval_override
    app.dependency_overrides[get_document_service] = documents_override
    app.dependency_overrides[get_faq_cache_service] = faq_override
    app.dependency_overrides[get_changelog_service] = lambda: changelog_service
    app.dependency_overrides[build_docs_crawler] = lambda: crawler

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


# ── Search ──


@pytest.mark.asyncio
async def test_search_returns_one_result_per_document(client):
    response = await client.post("/api/v1/search", json={"queries": ["rooms participants"]})

    assert response.status_code == 200
    data = response.json()
    resource_ids = [r["resource_id"] for r in data["results"]]
    assert data["total"] == len(resource_ids)
    assert len(resource_ids) == len(set(resource_ids))
    assert all(r["similarity"] > 0.3 for r in data["results"])


@pytest.mark.asyncio
async def test_search_respects_category_filter(client):
    response = await client.post(
        "/api/v1/search",
        json={"queries": ["rooms participants"], "categories": ["Agents"]},
    )

    assert response.status_code == 200
    assert {r["category"] for r in response.json()["results"]} == {"Agents"}


@pytest.mark.asyncio
async def test_search_requires_a_query(client):
    response = await client.post("/api/v1/search", json={"queries": []})
    assert response.status_code == 422


# ── Documents ──


@pytest.mark.asyncio
async def test_get_full_document(client):
    response = await client.get("/api/v1/documents/res-rooms")

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "Rooms hold participants\n\nRooms close when empty"
    assert data["chunk_count"] == 2
    assert data["category"] == "Home"


@pytest.mark.asyncio
async def test_get_missing_document_returns_404(client):
    response = await client.get("/api/v1/documents/does-not-exist")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_categories(client):
    response = await client.get("/api/v1/categories")

    assert response.status_code == 200
    assert response.json() == [
        {"name": "Agents", "count": 1},
        {"name": "Home", "count": 1},
    ]


# ── FAQ ──


@pytest.mark.asyncio
async def test_faq_search_hit(client, faq_repo):
    response = await client.post("/api/v1/faq/search", json={"query": "How to join a room?"})

    assert response.status_code == 200
    match = response.json()["match"]
    assert match["answer"] == "Use room.connect(url, token)."
    assert faq_repo.entries[0].hits == 1


@pytest.mark.asyncio
async def test_faq_search_honours_explicit_threshold(client, faq_repo):
    response = await client.post(
        "/api/v1/faq/search", json={"query": "How to join a room?", "threshold": 0.0}
    )

    assert response.status_code == 200
    assert response.json() == {"match": None}
    assert faq_repo.entries[0].hits == 0


@pytest.mark.asyncio
async def test_faq_search_miss(client):
    response = await client.post("/api/v1/faq/search", json={"query": "egress pricing tiers"})
    assert response.status_code == 200
    assert response.json() == {"match": None}


@pytest.mark.asyncio
async def test_create_faq(client, faq_repo):
    response = await client.post(
        "/api/v1/faq",
        json={"question": "what is a track", "answer": "A media stream.", "category": "Concepts"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["question"] == "what is a track"
    assert body["hits"] == 0
    assert len(faq_repo.entries) == 2


# ── Indexing ──


@pytest.mark.asyncio
async def test_index_docs_runs_crawler_in_background(client, crawler):
    response = await client.post("/api/v1/index-docs")

    assert response.status_code == 202
    assert response.json()["status"] == "started"
    assert crawler.runs == 1


# ── Changelog ──


@pytest.mark.asyncio
async def test_list_sdks(client):
    response = await client.get("/api/v1/changelog")

    assert response.status_code == 200
    slugs = {sdk["slug"] for sdk in response.json()["sdks"]}
    assert "python-agents" in slugs
    assert "swift-ios" in slugs


@pytest.mark.asyncio
async def test_get_changelog(client):
    response = await client.get("/api/v1/changelog/python-agents")

    assert response.status_code == 200
    data = response.json()
    assert data["sdk"] == "Python Agents SDK"
    assert data["content"].startswith("## 1.2.0")


@pytest.mark.asyncio
async def test_unknown_sdk_returns_404(client):
    response = await client.get("/api/v1/changelog/cobol-sdk")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_changelog_unavailable_returns_502(client, fetcher):
    fetcher.fail = True
    response = await client.get("/api/v1/changelog/rust")
    assert response.status_code == 502
