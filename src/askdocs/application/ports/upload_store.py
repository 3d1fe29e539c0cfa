"""Upload store port - transient storage of uploaded files."""

from pathlib import Path
from typing import Protocol

from askdocs.application.dto.document_dto import StoredUpload


class UploadStore(Protocol):
    """Port for writing, reading and removing transient uploads."""

    async def save(self, data: bytes, original_name: str) -> StoredUpload: ...

    async def read(self, path: Path) -> bytes: ...

    async def delete(self, path: Path) -> None: ...
