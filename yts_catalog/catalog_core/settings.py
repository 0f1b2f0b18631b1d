"""Runtime configuration for the catalog mirror."""
from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.paths import default_database_path


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CatalogSettings(BaseSettings):
    """Environment-aware settings for syncing and reporting."""

    api_url: str = Field(
        "https://yts.bz/api/v2/list_movies.json",
        description="Listing endpoint of the remote movie catalog.",
    )
    page_size: int = Field(
        default=50, ge=1, le=50, description="Number of movies requested per page."
    )
    database_path: Path = Field(
        default_factory=default_database_path,
        description="JSON file holding the mirrored collection.",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for catalog requests."
    )
    user_agent: str = Field(
        default="yts-catalog/0.1.0", description="User-Agent header sent to the catalog."
    )
    log_level: LogLevel = Field(default="WARNING", description="Root logging level for the CLI.")

    model_config = SettingsConfigDict(
        env_prefix="YTS_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
