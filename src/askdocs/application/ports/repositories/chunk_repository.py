"""Chunk repository port."""

from typing import Protocol

from askdocs.domain.entities import Chunk


class ChunkRepository(Protocol):
    """Port for chunk persistence and similarity search."""

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]: ...

    async def search(
        self,
        query_embedding: list[float],
        limit: int = 5,
    ) -> list[dict[str, object]]: ...
