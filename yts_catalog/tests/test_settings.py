"""Tests for environment-driven catalog settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from yts_catalog.catalog_core.settings import CatalogSettings


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    """Lower-case level names from the environment are accepted."""

    monkeypatch.setenv("YTS_CATALOG_LOG_LEVEL", " debug ")

    assert CatalogSettings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError, match="log_level"):
        CatalogSettings(log_level="verbose")


def test_defaults_match_remote_listing(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_URL", "PAGE_SIZE", "LOG_LEVEL", "DATABASE_PATH"):
        monkeypatch.delenv(f"YTS_CATALOG_{name}", raising=False)

    settings = CatalogSettings()

    assert settings.api_url == "https://yts.bz/api/v2/list_movies.json"
    assert settings.page_size == 50
    assert settings.log_level == "WARNING"
    assert settings.database_path.name == "yts_movies.json"
