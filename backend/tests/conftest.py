"""Shared pytest fixtures built on the in-memory fakes."""

import pytest

from fakes import (
    FakeChunkRepository,
    FakeEmbeddingProvider,
    FakeResourceRepository,
    InMemoryIndex,
)


@pytest.fixture
def index() -> InMemoryIndex:
    return InMemoryIndex()


@pytest.fixture
def resource_repo(index: InMemoryIndex) -> FakeResourceRepository:
    return FakeResourceRepository(index)


@pytest.fixture
def chunk_repo(index: InMemoryIndex) -> FakeChunkRepository:
    return FakeChunkRepository(index)


@pytest.fixture
def embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()
