"""Domain exceptions."""


class AskDocsError(Exception):
    """Base exception for askdocs."""

    pass


class UnsupportedFileType(AskDocsError):
    """Uploaded file has an extension no extractor handles."""

    pass


class ParseError(AskDocsError):
    """Text could not be extracted from an uploaded file."""

    pass


class EmbeddingError(AskDocsError):
    """Embedding service call failed or returned an unusable vector."""

    pass


class StoreError(AskDocsError):
    """Vector store read or write failed."""

    pass


class GenerationError(AskDocsError):
    """Completion service call failed."""

    pass


class ValidationError(AskDocsError):
    """Validation failed for input data."""

    pass
