"""Uploadable file types."""

from enum import StrEnum
from pathlib import Path


class FileType(StrEnum):
    """File extensions accepted for upload."""

    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"

    @classmethod
    def from_extension(cls, extension: str) -> "FileType | None":
        """Map '.pdf', 'PDF', 'pdf' ... to a FileType, or None if unsupported."""
        ext = extension.strip().lstrip(".").lower()
        try:
            return cls(ext)
        except ValueError:
            return None

    @classmethod
    def from_filename(cls, filename: str | None) -> "FileType | None":
        if not filename:
            return None
        return cls.from_extension(Path(filename).suffix)
