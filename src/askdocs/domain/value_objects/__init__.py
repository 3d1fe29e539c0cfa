"""Domain value objects."""

from askdocs.domain.value_objects.file_type import FileType
from askdocs.domain.value_objects.ingestion_state import IngestionState

__all__ = [
    "FileType",
    "IngestionState",
]
