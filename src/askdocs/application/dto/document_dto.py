"""Document DTOs."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from uuid import UUID


@dataclass
class StoredUpload:
    """Upload written to the transient upload directory."""

    path: Path
    filename: str


@dataclass
class DocumentIngestInput:
    """Input for ingesting an uploaded file."""

    upload: StoredUpload
    original_name: str


@dataclass
class DocumentOutput:
    """Output DTO for document."""

    id: UUID
    filename: str
    original_name: str
    upload_date: datetime


@dataclass
class IngestionResult:
    """Summary of a successful ingestion."""

    document: DocumentOutput
    chunks_count: int
