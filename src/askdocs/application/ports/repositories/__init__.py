"""Repository ports."""

from askdocs.application.ports.repositories.chunk_repository import ChunkRepository
from askdocs.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "ChunkRepository",
    "DocumentRepository",
]
