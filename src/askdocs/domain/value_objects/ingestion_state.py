"""Ingestion pipeline states."""

from enum import StrEnum


class IngestionState(StrEnum):
    """Stages an upload passes through, in order."""

    RECEIVED = "received"
    PARSED = "parsed"
    CHUNKED = "chunked"
    EMBEDDED = "embedded"
    STORED = "stored"
    CLEANED_UP = "cleaned_up"
