"""Parser for PDF."""

import io

from pypdf import PdfReader
from pypdf.errors import PyPdfError


def parse_pdf(data: bytes) -> str:
    """Extract text of every page from PDF bytes."""
    try:
        reader = PdfReader(io.BytesIO(data))
        parts = [t for t in (page.extract_text() for page in reader.pages) if t]
    except (PyPdfError, ValueError, KeyError, TypeError) as e:
        raise ValueError(f"Invalid or corrupted PDF: {e}") from e
    return "\n\n".join(parts)
