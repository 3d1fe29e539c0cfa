"""Unit tests for PostgreSQL repositories and UnitOfWork (mocked connections)."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import psycopg
import pytest

from askdocs.domain.entities import Chunk
from askdocs.domain.exceptions import StoreError
from askdocs.infrastructure.persistence.postgres.chunk_repository import PostgresChunkRepository
from askdocs.infrastructure.persistence.postgres.unit_of_work import create_uow_factory


@pytest.mark.asyncio
async def test_search_uses_match_chunks() -> None:
    chunk_id, document_id = uuid4(), uuid4()
    cur = MagicMock()
    cur.fetchall = AsyncMock(return_value=[(chunk_id, document_id, 2, "content", 0.83)])
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cur)

    results = await PostgresChunkRepository(conn).search([0.1, 0.2], limit=3)

    sql, params = conn.execute.await_args.args
    assert "match_chunks(%s::vector, %s)" in sql
    assert params == ([0.1, 0.2], 3)
    assert results == [
        {
            "chunk_id": chunk_id,
            "document_id": document_id,
            "chunk_index": 2,
            "content": "content",
            "similarity": 0.83,
        }
    ]


@pytest.mark.asyncio
async def test_create_batch_inserts_all_chunks() -> None:
    cur = MagicMock()
    cur.executemany = AsyncMock()
    conn = MagicMock()
    conn.cursor.return_value.__aenter__.return_value = cur
    document_id = uuid4()
    chunks = [
        Chunk(id=uuid4(), document_id=document_id, chunk_index=i, content=f"c{i}", embedding=[0.0, 1.0])
        for i in range(3)
    ]

    await PostgresChunkRepository(conn).create_batch(chunks)

    sql, rows = cur.executemany.await_args.args
    assert "INSERT INTO chunks" in sql
    assert [r[2] for r in rows] == [0, 1, 2]
    assert all(r[1] == document_id for r in rows)


@pytest.mark.asyncio
async def test_create_batch_empty_skips_database() -> None:
    conn = MagicMock()
    assert await PostgresChunkRepository(conn).create_batch([]) == []
    conn.cursor.assert_not_called()


def _pool_with_connection(conn: MagicMock) -> MagicMock:
    pool = MagicMock()
    pool.connection.return_value.__aenter__.return_value = conn
    return pool


@pytest.mark.asyncio
async def test_uow_commits_on_success() -> None:
    conn = MagicMock()
    conn.commit = AsyncMock()
    conn.rollback = AsyncMock()
    factory = create_uow_factory(_pool_with_connection(conn))

    async with factory() as uow:
        assert uow.chunks is not None

    conn.commit.assert_awaited_once()
    conn.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_uow_rolls_back_on_error() -> None:
    conn = MagicMock()
    conn.commit = AsyncMock()
    conn.rollback = AsyncMock()
    factory = create_uow_factory(_pool_with_connection(conn))

    with pytest.raises(RuntimeError):
        async with factory():
            raise RuntimeError("boom")

    conn.rollback.assert_awaited_once()
    conn.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_uow_wraps_database_errors() -> None:
    pool = MagicMock()
    pool.connection.return_value.__aenter__.side_effect = psycopg.OperationalError(
        "connection refused"
    )
    factory = create_uow_factory(pool)

    with pytest.raises(StoreError, match="Database error: connection refused"):
        async with factory():
            pass
