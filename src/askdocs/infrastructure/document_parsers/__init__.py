"""Document parsers: extract plain text from uploaded files."""

from askdocs.infrastructure.document_parsers.registry import (
    DocumentTextExtractor,
    parse_file,
)

__all__ = ["DocumentTextExtractor", "parse_file"]
