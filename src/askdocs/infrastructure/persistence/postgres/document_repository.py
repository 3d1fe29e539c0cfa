"""PostgreSQL document repository implementation."""

from psycopg import AsyncConnection

from askdocs.domain.entities import Document


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            "INSERT INTO documents (id, filename, original_name, upload_date, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.filename,
                document.original_name,
                document.upload_date,
                document.created_at,
                document.updated_at,
            ),
        )
        return document
