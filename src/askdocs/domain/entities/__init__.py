"""Domain entities."""

from askdocs.domain.entities.chunk import Chunk
from askdocs.domain.entities.document import Document

__all__ = [
    "Chunk",
    "Document",
]
