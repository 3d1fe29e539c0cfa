"""Application entry point and composition root."""

import logging
import sys

import uvicorn
from falcon.asgi import App
from openai import AsyncOpenAI
from pydantic import ValidationError

from askdocs import __version__
from askdocs.application.dto.chunking_config import ChunkingConfig
from askdocs.application.use_cases.document.ingest_document import IngestDocumentUseCase
from askdocs.application.use_cases.question.answer_question import AnswerQuestionUseCase
from askdocs.config import Settings, get_settings
from askdocs.infrastructure.chunking.sentence_chunker import SentenceBoundaryChunker
from askdocs.infrastructure.document_parsers import DocumentTextExtractor
from askdocs.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from askdocs.infrastructure.generation.openai_generator import OpenAIAnswerGenerator
from askdocs.infrastructure.persistence.postgres.connection import create_pool
from askdocs.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from askdocs.infrastructure.uploads.local_upload_store import LocalUploadStore
from askdocs.interfaces.api.app import create_app
from askdocs.interfaces.api.middleware.lifespan import LifespanMiddleware
from askdocs.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from askdocs.interfaces.api.resources.ask import AskResource
from askdocs.interfaces.api.resources.health import HealthResource
from askdocs.interfaces.api.resources.slack import SlackAskResource
from askdocs.interfaces.api.resources.upload import UploadResource
from askdocs.observability import configure_logging

logger = logging.getLogger(__name__)


def create_askdocs_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    chunking_config = ChunkingConfig(
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
    )

    pool = create_pool(settings.database_url, timeout=settings.request_timeout)
    uow_factory = create_uow_factory(pool)

    openai_client = AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.request_timeout,
        max_retries=0,
    )
    embedding_provider = OpenAIEmbeddingProvider(
        client=openai_client,
        model=settings.embedding_model,
        dimensions=settings.embedding_dimensions,
        concurrency=settings.embedding_concurrency,
    )
    answer_generator = OpenAIAnswerGenerator(
        client=openai_client,
        model=settings.completion_model,
        temperature=settings.completion_temperature,
        max_tokens=settings.completion_max_tokens,
    )
    upload_store = LocalUploadStore(settings.upload_dir)

    ingest_document = IngestDocumentUseCase(
        unit_of_work_factory=uow_factory,
        extractor=DocumentTextExtractor(),
        chunker=SentenceBoundaryChunker(),
        embedding_provider=embedding_provider,
        upload_store=upload_store,
        chunking_config=chunking_config,
    )
    answer_question = AnswerQuestionUseCase(
        unit_of_work_factory=uow_factory,
        embedding_provider=embedding_provider,
        answer_generator=answer_generator,
        top_k=settings.top_k,
    )

    return create_app(
        upload_resource=UploadResource(
            ingest_document, upload_store, settings.max_upload_bytes
        ),
        ask_resource=AskResource(answer_question),
        slack_resource=SlackAskResource(answer_question),
        health_resource=HealthResource(pool),
        middleware=[
            RequestLoggingMiddleware(),
            LifespanMiddleware(pool, openai_client, upload_store),
        ],
    )


def main() -> None:
    """CLI entry point - run the HTTP server."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        missing = [
            ".".join(str(part) for part in err["loc"]).upper() for err in e.errors()
        ]
        logger.critical("Invalid or missing configuration: %s", ", ".join(missing))
        sys.exit(1)

    configure_logging(settings.log_level)
    try:
        app = create_askdocs_app(settings)
    except ValueError as e:
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)

    logger.info("askdocs v%s listening on %s:%d", __version__, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
