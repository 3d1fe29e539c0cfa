"""Document repository port."""

from typing import Protocol

from askdocs.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def create(self, document: Document) -> Document: ...
