"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Width of the chunks.embedding vector column created by migration 001
SCHEMA_EMBEDDING_DIMENSIONS = 1536


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenAI (embeddings + completions)
    openai_api_key: str = Field(description="OpenAI API key")
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI-compatible API URL",
    )
    embedding_model: str = Field(
        default="text-embedding-3-small",
        description="Embedding model name",
    )
    embedding_dimensions: int = Field(
        default=SCHEMA_EMBEDDING_DIMENSIONS,
        description="Embedding vector size, fixed by the database schema",
    )
    embedding_concurrency: int = Field(
        default=1,
        ge=1,
        description="Parallel embedding requests per upload (1 = sequential)",
    )
    completion_model: str = Field(default="gpt-4", description="Chat completion model name")
    completion_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    completion_max_tokens: int = Field(default=500, gt=0)
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for each external call",
    )

    # Vector store
    database_url: str = Field(description="PostgreSQL (pgvector) connection URL")

    # Pipeline
    chunk_size: int = Field(default=1000, gt=0)
    chunk_overlap: int = Field(default=200, ge=0)
    top_k: int = Field(default=5, ge=1, description="Chunks retrieved per question")
    max_upload_size_mb: int = Field(default=5, gt=0)
    upload_dir: Path = Field(default=Path("uploads"), description="Transient upload directory")

    # Application
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=3000, description="Listen port")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("embedding_dimensions")
    @classmethod
    def _match_schema_dimensions(cls, v: int) -> int:
        if v != SCHEMA_EMBEDDING_DIMENSIONS:
            raise ValueError(
                f"embedding_dimensions must be {SCHEMA_EMBEDDING_DIMENSIONS} "
                "to match the chunks.embedding column; change the migration first"
            )
        return v

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
