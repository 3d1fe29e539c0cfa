"""Chunk entity - text segment with embedding."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Chunk:
    """Chunk - text segment of a document with its vector embedding."""

    id: UUID
    document_id: UUID
    chunk_index: int
    content: str
    embedding: list[float]
