"""Lifespan middleware - opens shared resources on startup, closes them on shutdown."""

import logging
from typing import Any

from openai import AsyncOpenAI
from psycopg_pool import AsyncConnectionPool

from askdocs.infrastructure.uploads.local_upload_store import LocalUploadStore

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the connection pool and upload directory; closes pool and API client."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        openai_client: AsyncOpenAI,
        upload_store: LocalUploadStore,
    ) -> None:
        self._pool = pool
        self._openai_client = openai_client
        self._upload_store = upload_store

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        self._upload_store.ensure_directory()
        await self._pool.open()
        logger.info("Connection pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool and HTTP client when ASGI server shuts down."""
        await self._pool.close()
        await self._openai_client.close()
        logger.info("Connection pool closed")
