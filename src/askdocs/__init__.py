"""askdocs - document Q&A over pgvector with OpenAI."""

__version__ = "0.1.0"
