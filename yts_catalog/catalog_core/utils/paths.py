"""Filesystem helpers for the local catalog database."""
from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir


APP_NAME = "yts-catalog"
APP_AUTHOR = "yts-catalog"
DATABASE_FILENAME = "yts_movies.json"


def default_database_path() -> Path:
    """Return the platform-appropriate default location of the movie database."""

    return Path(user_data_dir(APP_NAME, APP_AUTHOR)) / DATABASE_FILENAME


def ensure_parent_directory(path: Path) -> Path:
    """Expand ``path`` and create its parent directory if it does not exist."""

    resolved = path.expanduser()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return resolved
