"""Unit tests for the DocumentIndexingService."""

import pytest

from docs_assistant.application.services import (
    DocumentIndexingService,
    DocumentService,
    EmbeddingGateway,
    split_text,
)
from docs_assistant.domain.entities import DocumentProvenance
from docs_assistant.domain.exceptions import EmbeddingProviderError


@pytest.fixture
def service(resource_repo, chunk_repo, embedding_provider) -> DocumentIndexingService:
    return DocumentIndexingService(resource_repo, chunk_repo, EmbeddingGateway(embedding_provider))


@pytest.mark.asyncio
async def test_index_short_document_creates_one_chunk(service, index):
    provenance = DocumentProvenance(
        category="Home",
        source_url="https://docs.livekit.io/home/get-started",
        source_title="Get started",
    )

    resource = await service.index_document("  Rooms hold participants.  ", provenance)

    assert resource is not None
    assert resource.content == "Rooms hold participants."
    assert resource.category == "Home"
    assert len(index.chunks) == 1
    assert index.chunks[0].resource_id == resource.id
    assert len(index.chunks[0].embedding) == 26


@pytest.mark.asyncio
async def test_index_long_document_round_trips_through_document_service(
    service, resource_repo, chunk_repo, index
):
    text = "Tracks carry media between participants. " * 120

    resource = await service.index_document(text)
    document = await DocumentService(chunk_repo, resource_repo).get_full_document(resource.id)

    assert len(index.chunks) > 1
    assert [c.chunk_index for c in index.chunks] == list(range(len(index.chunks)))
    assert document.chunk_count == len(index.chunks)
    assert document.content == "\n\n".join(split_text(text))


@pytest.mark.asyncio
async def test_blank_document_is_skipped(service, index, embedding_provider):
    assert await service.index_document(" \n ") is None
    assert index.resources == {}
    assert embedding_provider.calls == []


@pytest.mark.asyncio
async def test_embedding_failure_propagates(resource_repo, chunk_repo, index):
    class FailingProvider:
        dimensions = 26

        async def generate_embeddings(self, texts):
            raise EmbeddingProviderError("fake", 500, "boom")

    service = DocumentIndexingService(resource_repo, chunk_repo, EmbeddingGateway(FailingProvider()))

    with pytest.raises(EmbeddingProviderError):
        await service.index_document("Some documentation text.")
    assert index.chunks == []


@pytest.mark.asyncio
async def test_delete_document_removes_chunks(service, index):
    resource = await service.index_document("A page about agents.")
    assert await service.delete_document(resource.id) is True
    assert index.chunks == []
    assert await service.delete_document(resource.id) is False


@pytest.mark.asyncio
async def test_clear_index_removes_everything(service, index):
    await service.index_document("First page.")
    await service.index_document("Second page.")

    assert await service.clear_index() == 2
    assert index.resources == {}
    assert index.chunks == []
