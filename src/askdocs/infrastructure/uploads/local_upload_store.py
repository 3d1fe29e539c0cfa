"""Local directory for transient uploads."""

import asyncio
import logging
import secrets
import time
from pathlib import Path

from askdocs.application.dto.document_dto import StoredUpload

logger = logging.getLogger(__name__)


def make_upload_filename(original_name: str, field_name: str = "file") -> str:
    """Unique stored name: <field>-<epoch ms>-<random><original suffix>."""
    suffix = Path(original_name).suffix.lower()
    return f"{field_name}-{time.time_ns() // 1_000_000}-{secrets.randbelow(10**9)}{suffix}"


class LocalUploadStore:
    """UploadStore writing uploads into a local directory."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def ensure_directory(self) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)

    async def save(self, data: bytes, original_name: str) -> StoredUpload:
        filename = make_upload_filename(original_name)
        path = self._directory / filename
        try:
            await asyncio.to_thread(path.write_bytes, data)
        except OSError:
            # no partial file may stay behind
            await asyncio.to_thread(path.unlink, missing_ok=True)
            raise
        logger.debug("Stored upload %s (%d bytes)", path, len(data))
        return StoredUpload(path=path, filename=filename)

    async def read(self, path: Path) -> bytes:
        return await asyncio.to_thread(path.read_bytes)

    async def delete(self, path: Path) -> None:
        await asyncio.to_thread(path.unlink, missing_ok=True)
