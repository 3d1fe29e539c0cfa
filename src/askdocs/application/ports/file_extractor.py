"""File extractor port - bytes to plain text."""

from typing import Protocol


class FileExtractor(Protocol):
    """Port for extracting text from uploaded files.

    Raises UnsupportedFileType for unknown extensions and ParseError when the
    payload cannot be decoded.
    """

    def extract(self, data: bytes, extension: str) -> str: ...
