"""Unit tests for domain exceptions and value objects."""

import pytest

from askdocs.domain.exceptions import (
    AskDocsError,
    EmbeddingError,
    GenerationError,
    ParseError,
    StoreError,
    UnsupportedFileType,
    ValidationError,
)
from askdocs.domain.value_objects import FileType, IngestionState


@pytest.mark.parametrize(
    "exc_type",
    [UnsupportedFileType, ParseError, EmbeddingError, StoreError, GenerationError, ValidationError],
)
def test_errors_inherit_askdocs_error(exc_type: type[Exception]) -> None:
    assert issubclass(exc_type, AskDocsError)


def test_raise_parse_error_catchable_as_askdocs_error() -> None:
    """ParseError can be caught as AskDocsError and keeps its message."""
    with pytest.raises(AskDocsError, match="Error parsing file"):
        raise ParseError("Error parsing file: bad header")


@pytest.mark.parametrize(
    ("extension", "expected"),
    [
        (".pdf", FileType.PDF),
        ("PDF", FileType.PDF),
        (".Docx", FileType.DOCX),
        ("txt", FileType.TXT),
        (".doc", None),
        ("", None),
    ],
)
def test_file_type_from_extension(extension: str, expected: FileType | None) -> None:
    assert FileType.from_extension(extension) is expected


def test_file_type_from_filename() -> None:
    assert FileType.from_filename("Report.Final.PDF") is FileType.PDF
    assert FileType.from_filename("notes") is None
    assert FileType.from_filename(None) is None


def test_ingestion_states_in_pipeline_order() -> None:
    assert [s.value for s in IngestionState] == [
        "received",
        "parsed",
        "chunked",
        "embedded",
        "stored",
        "cleaned_up",
    ]
