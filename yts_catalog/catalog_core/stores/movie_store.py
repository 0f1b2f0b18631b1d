"""JSON file store holding the mirrored movie collection."""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from ..errors import MovieStoreError
from ..schemas import MovieModel
from ..utils.paths import ensure_parent_directory

logger = logging.getLogger(__name__)

_COLLECTION = TypeAdapter(list[MovieModel])


class MovieStore:
    """Loads and replaces the whole collection in a single JSON document."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> list[MovieModel]:
        """Return the stored movies, or an empty list when no file exists yet."""

        if not self._path.exists():
            logger.debug("No database at %s; starting empty", self._path)
            return []

        try:
            content = self._path.read_bytes()
        except OSError as exc:
            raise MovieStoreError(f"Unable to read {self._path}: {exc}") from exc

        try:
            movies = _COLLECTION.validate_json(content)
        except ValidationError as exc:
            raise MovieStoreError(f"Database file {self._path} is corrupt") from exc

        logger.debug("Loaded %d movies from %s", len(movies), self._path)
        return movies

    def save(self, movies: Sequence[MovieModel]) -> None:
        """Serialize ``movies`` and atomically replace the database file."""

        payload = _COLLECTION.dump_json(list(movies), indent=2, exclude_none=True)

        try:
            target = ensure_parent_directory(self._path)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as exc:
            raise MovieStoreError(f"Unable to write {self._path}: {exc}") from exc

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, target)
        except OSError as exc:
            raise MovieStoreError(f"Unable to write {target}: {exc}") from exc
        finally:
            # No-op after a successful replace.
            Path(tmp_name).unlink(missing_ok=True)

        logger.info("Saved %d movies to %s", len(movies), target)
