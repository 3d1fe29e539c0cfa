"""PostgreSQL chunk repository implementation."""

from psycopg import AsyncConnection

from askdocs.domain.entities import Chunk


class PostgresChunkRepository:
    """Chunk repository implementation with pgvector cosine search."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]:
        """Create chunks in batch."""
        if not chunks:
            return chunks
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO chunks (id, document_id, chunk_index, content, embedding) "
                "VALUES (%s, %s, %s, %s, %s::vector)",
                [(c.id, c.document_id, c.chunk_index, c.content, c.embedding) for c in chunks],
            )
        return chunks

    async def search(self, query_embedding: list[float], limit: int = 5) -> list[dict]:
        """Nearest chunks by cosine similarity, most similar first."""
        cur = await self._conn.execute(
            "SELECT id, document_id, chunk_index, content, similarity "
            "FROM match_chunks(%s::vector, %s)",
            (query_embedding, limit),
        )
        rows = await cur.fetchall()
        return [
            {
                "chunk_id": r[0],
                "document_id": r[1],
                "chunk_index": r[2],
                "content": r[3],
                "similarity": float(r[4]),
            }
            for r in rows
        ]
