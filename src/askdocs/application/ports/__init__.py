"""Application ports - interfaces for external adapters."""

from askdocs.application.ports.answer_generator import AnswerGenerator
from askdocs.application.ports.chunker import Chunker
from askdocs.application.ports.embedding_provider import EmbeddingProvider
from askdocs.application.ports.file_extractor import FileExtractor
from askdocs.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory
from askdocs.application.ports.upload_store import UploadStore

__all__ = [
    "AnswerGenerator",
    "Chunker",
    "EmbeddingProvider",
    "FileExtractor",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "UploadStore",
]
