"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from askdocs.application.dto.chunking_config import ChunkingConfig
from askdocs.application.use_cases.document.ingest_document import IngestDocumentUseCase
from askdocs.application.use_cases.question.answer_question import AnswerQuestionUseCase
from askdocs.infrastructure.chunking.sentence_chunker import SentenceBoundaryChunker
from askdocs.infrastructure.document_parsers import DocumentTextExtractor
from askdocs.interfaces.api.app import create_app
from askdocs.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from askdocs.interfaces.api.resources.ask import AskResource
from askdocs.interfaces.api.resources.health import HealthResource
from askdocs.interfaces.api.resources.slack import SlackAskResource
from askdocs.interfaces.api.resources.upload import UploadResource

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@pytest.fixture
def app(uow_factory, mock_embedding_provider, mock_answer_generator, upload_store):
    """Falcon ASGI app with in-memory store and mocked OpenAI adapters."""
    ingest_document = IngestDocumentUseCase(
        unit_of_work_factory=uow_factory,
        extractor=DocumentTextExtractor(),
        chunker=SentenceBoundaryChunker(),
        embedding_provider=mock_embedding_provider,
        upload_store=upload_store,
        chunking_config=ChunkingConfig(chunk_size=100, chunk_overlap=20),
    )
    answer_question = AnswerQuestionUseCase(
        unit_of_work_factory=uow_factory,
        embedding_provider=mock_embedding_provider,
        answer_generator=mock_answer_generator,
        top_k=5,
    )
    return create_app(
        upload_resource=UploadResource(ingest_document, upload_store, MAX_UPLOAD_BYTES),
        ask_resource=AskResource(answer_question),
        slack_resource=SlackAskResource(answer_question),
        health_resource=HealthResource(),
        middleware=[RequestLoggingMiddleware()],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
