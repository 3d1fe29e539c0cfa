"""Registry: select parser by extension and return extracted text."""

from collections.abc import Callable

from askdocs.domain.exceptions import ParseError, UnsupportedFileType
from askdocs.domain.value_objects import FileType
from askdocs.infrastructure.document_parsers.docx_parser import parse_docx
from askdocs.infrastructure.document_parsers.pdf_parser import parse_pdf
from askdocs.infrastructure.document_parsers.text_parser import parse_txt

_PARSERS: dict[FileType, Callable[[bytes], str]] = {
    FileType.TXT: parse_txt,
    FileType.DOCX: parse_docx,
    FileType.PDF: parse_pdf,
}


def parse_file(data: bytes, extension: str) -> str:
    """
    Run the parser registered for extension ('.pdf', 'docx', ...) on data.
    Raises UnsupportedFileType if no parser is registered, ParseError if parsing failed.
    """
    file_type = FileType.from_extension(extension)
    parser = _PARSERS.get(file_type) if file_type else None
    if not parser:
        raise UnsupportedFileType(f"Unsupported file type: {extension or 'unknown'}")
    try:
        return parser(data)
    except ValueError as e:
        raise ParseError(f"Error parsing file: {e}") from e


class DocumentTextExtractor:
    """FileExtractor backed by the parser registry."""

    def extract(self, data: bytes, extension: str) -> str:
        return parse_file(data, extension)
