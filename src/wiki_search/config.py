"""Centralized configuration for wiki-search using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Values are validated when the settings object is created, so a missing
    index path for a file-backed backend fails before any lookup runs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Index lookup collaborator
    index_backend: Literal["memory", "json", "sqlite"] = Field(
        default="memory", description="Term-count store used to answer term lookups"
    )
    index_path: Path | None = Field(
        default=None, description="JSON snapshot or SQLite database holding term counts"
    )
    sqlite_busy_timeout_ms: int = Field(default=30000, ge=0, description="SQLite busy timeout in milliseconds")

    # Ranking
    rank_descending: bool = Field(default=False, description="List the most relevant documents first")
    tie_break: Literal["stable", "doc_id"] = Field(
        default="stable", description="Order of documents with equal relevance"
    )
    max_results: int = Field(default=0, ge=0, description="Maximum ranked entries to show (0 = all)")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_index_path(self) -> "Settings":
        if self.index_backend in {"json", "sqlite"} and self.index_path is None:
            raise ValueError(
                f"INDEX_PATH must be set when INDEX_BACKEND is {self.index_backend!r}. "
                "Point it at the JSON snapshot or SQLite database produced by the indexer."
            )
        return self

    def uses_file_index(self) -> bool:
        """Check if lookups are served from a file on disk."""
        return self.index_backend != "memory"
