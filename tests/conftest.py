"""Pytest fixtures for askdocs tests."""

from __future__ import annotations

import math
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from askdocs.application.dto.chunking_config import ChunkingConfig
from askdocs.domain.entities import Chunk, Document
from askdocs.domain.exceptions import StoreError
from askdocs.infrastructure.uploads.local_upload_store import LocalUploadStore


def _cosine(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}

    async def create(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document


class FakeChunkRepository:
    """In-memory chunk repository with cosine search."""

    def __init__(self) -> None:
        self._chunks: list[Chunk] = []
        self.fail_on_create = False

    def add(self, content: str, embedding: list[float], document_id: UUID | None = None) -> Chunk:
        chunk = Chunk(
            id=uuid4(),
            document_id=document_id or uuid4(),
            chunk_index=len(self._chunks),
            content=content,
            embedding=embedding,
        )
        self._chunks.append(chunk)
        return chunk

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]:
        if self.fail_on_create:
            raise StoreError("Database error: insert failed")
        self._chunks.extend(chunks)
        return chunks

    async def search(self, query_embedding: list[float], limit: int = 5) -> list[dict]:
        scored = [(c, _cosine(query_embedding, c.embedding)) for c in self._chunks]
        scored.sort(key=lambda item: item[1], reverse=True)
        return [
            {
                "chunk_id": c.id,
                "document_id": c.document_id,
                "chunk_index": c.chunk_index,
                "content": c.content,
                "similarity": similarity,
            }
            for c, similarity in scored[:limit]
        ]


class FakeUnitOfWork:
    """In-memory UnitOfWork with all fake repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.chunks = FakeChunkRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory sharing one FakeUnitOfWork; a failing block leaves no writes behind."""

    @asynccontextmanager
    async def _factory():
        documents = dict(uow.documents._by_id)
        chunks = list(uow.chunks._chunks)
        try:
            yield uow
        except BaseException:
            uow.documents._by_id = documents
            uow.chunks._chunks = chunks
            raise
        await uow.commit()

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_embedding_provider():
    """AsyncMock for EmbeddingProvider - fixed query vector, one vector per text."""

    async def _embed_many(texts: list[str]) -> list[list[float]]:
        return [[0.1, 0.2, 0.3] for _ in texts]

    mock = AsyncMock()
    mock.embed = AsyncMock(return_value=[1.0, 0.0, 0.0])
    mock.embed_many = AsyncMock(side_effect=_embed_many)
    return mock


@pytest.fixture
def mock_answer_generator():
    """AsyncMock for AnswerGenerator."""
    mock = AsyncMock()
    mock.answer = AsyncMock(return_value="Generated answer")
    return mock


@pytest.fixture
def upload_store(tmp_path) -> LocalUploadStore:
    """Upload store writing into a per-test temporary directory."""
    store = LocalUploadStore(tmp_path / "uploads")
    store.ensure_directory()
    return store


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    """Small chunking config for chunker tests."""
    return ChunkingConfig(chunk_size=100, chunk_overlap=20)
