"""Ingest document use case."""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path
from uuid import uuid4

from askdocs.application.dto.chunking_config import ChunkingConfig
from askdocs.application.dto.document_dto import (
    DocumentIngestInput,
    DocumentOutput,
    IngestionResult,
)
from askdocs.application.ports import (
    Chunker,
    EmbeddingProvider,
    FileExtractor,
    UnitOfWorkFactory,
    UploadStore,
)
from askdocs.domain.entities import Chunk, Document
from askdocs.domain.exceptions import ParseError
from askdocs.domain.value_objects import IngestionState

logger = logging.getLogger(__name__)


class IngestDocumentUseCase:
    """Ingest an uploaded file: parse, chunk, embed, store, then remove the upload.

    Any failure stops the pipeline and propagates unchanged. The upload file is
    removed whether ingestion succeeded or not; failing to remove it is only
    logged.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        extractor: FileExtractor,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        upload_store: UploadStore,
        chunking_config: ChunkingConfig | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._extractor = extractor
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._upload_store = upload_store
        self._chunking_config = chunking_config or ChunkingConfig()

    async def execute(self, input_data: DocumentIngestInput) -> IngestionResult:
        """Ingest one uploaded file."""
        upload = input_data.upload
        state = IngestionState.RECEIVED
        try:
            data = await self._upload_store.read(upload.path)
            text = await asyncio.to_thread(
                self._extractor.extract, data, Path(input_data.original_name).suffix
            )
            if not text.strip():
                raise ParseError("No text could be extracted from the file")
            state = IngestionState.PARSED
            logger.info("Parsed %s (%d characters)", input_data.original_name, len(text))

            chunks_text = self._chunker.chunk(text, self._chunking_config)
            state = IngestionState.CHUNKED
            logger.info("Split %s into %d chunks", input_data.original_name, len(chunks_text))

            embeddings = await self._embedding_provider.embed_many(chunks_text)
            state = IngestionState.EMBEDDED

            now = datetime.now(UTC)
            document = Document(
                id=uuid4(),
                filename=upload.filename,
                original_name=input_data.original_name,
                upload_date=now,
                created_at=now,
                updated_at=now,
            )
            chunk_entities = [
                Chunk(
                    id=uuid4(),
                    document_id=document.id,
                    chunk_index=i,
                    content=content,
                    embedding=embedding,
                )
                for i, (content, embedding) in enumerate(
                    zip(chunks_text, embeddings, strict=True)
                )
            ]
            async with self._uow_factory() as uow:
                await uow.documents.create(document)
                await uow.chunks.create_batch(chunk_entities)
            state = IngestionState.STORED
            logger.info("Stored document %s with %d chunks", document.id, len(chunk_entities))
        except Exception:
            logger.error("Ingestion of %s failed (last state: %s)", input_data.original_name, state)
            raise
        finally:
            await self._cleanup(upload.path)

        return IngestionResult(
            document=DocumentOutput(
                id=document.id,
                filename=document.filename,
                original_name=document.original_name,
                upload_date=document.upload_date,
            ),
            chunks_count=len(chunk_entities),
        )

    async def _cleanup(self, path: Path) -> None:
        try:
            await self._upload_store.delete(path)
        except OSError:
            logger.warning("Could not remove upload %s", path, exc_info=True)
        else:
            logger.debug("Ingestion state %s: removed %s", IngestionState.CLEANED_UP, path)
