"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Document:
    """Uploaded document; owns its chunks."""

    id: UUID
    filename: str
    original_name: str
    upload_date: datetime
    created_at: datetime
    updated_at: datetime
