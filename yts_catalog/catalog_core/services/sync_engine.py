"""Incremental sync of the remote listing into the local movie store."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Protocol

from ..schemas import MovieModel, RemoteMovie, TorrentModel
from ..stores.movie_store import MovieStore
from ..utils.magnet import build_magnet_url
from .catalog_client import CatalogClient

logger = logging.getLogger(__name__)


class ProgressSink(Protocol):
    """Receives progress updates while new movies are materialized."""

    def start(self, total: int) -> None: ...

    def advance(self, amount: int = 1) -> None: ...

    def finish(self) -> None: ...


class NullProgress:
    """Progress sink that ignores every update."""

    def start(self, total: int) -> None:
        pass

    def advance(self, amount: int = 1) -> None:
        pass

    def finish(self) -> None:
        pass


@dataclass(slots=True)
class SyncResult:
    """Outcome of a single sync run."""

    remote_count: int
    previous_count: int
    latest_local_id: int
    new_count: int
    total_count: int
    written: bool

    @property
    def up_to_date(self) -> bool:
        return self.new_count == 0


def latest_movie_id(movies: list[MovieModel]) -> int:
    """Return the high-water mark of ``movies`` (0 for an empty collection)."""

    return max((movie.id for movie in movies), default=0)


def to_movie(item: RemoteMovie) -> MovieModel:
    """Build a stored movie from a remote item, deriving magnet links and labels."""

    torrents = [
        TorrentModel(
            quality=f"{torrent.quality}-{torrent.torrent_type}",
            hash=torrent.hash,
            size_bytes=torrent.size_bytes,
            magnet_url=build_magnet_url(torrent.hash, item.title),
            size=torrent.size,
        )
        for torrent in item.torrents
    ]
    return MovieModel(
        id=item.id,
        title=item.title,
        year=item.year,
        imdb_code=item.imdb_code,
        torrents=torrents,
    )


def merge_movies(new_movies: list[MovieModel], existing: list[MovieModel]) -> list[MovieModel]:
    """Concatenate new and existing movies, newest id first."""

    merged = [*new_movies, *existing]
    merged.sort(key=lambda movie: movie.id, reverse=True)
    return merged


class SyncEngine:
    """Mirrors movies added remotely since the last sync into ``store``.

    The remote lists movies newest-first, so the first item whose id is at or
    below the local high-water mark ends pagination: everything after it is
    already known. Pages are requested one at a time and only while the
    boundary has not been reached.
    """

    def __init__(
        self,
        client: CatalogClient,
        store: MovieStore,
        *,
        progress: ProgressSink | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._progress = progress or NullProgress()

    def run(self) -> SyncResult:
        """Fetch new movies, merge them with the stored ones and persist the result."""

        existing = self._store.load()
        latest_id = latest_movie_id(existing)

        remote_count = self._client.fetch_page(1).movie_count
        logger.info("Remote catalog reports %d movies", remote_count)

        if latest_id > 0:
            logger.info(
                "Local database has %d movies, latest id %d", len(existing), latest_id
            )
            new_count = self.count_new(latest_id)
            if new_count == 0:
                logger.info("Database is up to date")
                return SyncResult(
                    remote_count=remote_count,
                    previous_count=len(existing),
                    latest_local_id=latest_id,
                    new_count=0,
                    total_count=len(existing),
                    written=False,
                )
            progress_total = new_count
        else:
            progress_total = remote_count

        new_movies = self.fetch_new(latest_id, progress_total=progress_total)
        merged = merge_movies(new_movies, existing)
        self._store.save(merged)

        return SyncResult(
            remote_count=remote_count,
            previous_count=len(existing),
            latest_local_id=latest_id,
            new_count=len(new_movies),
            total_count=len(merged),
            written=True,
        )

    def count_new(self, latest_id: int) -> int:
        """Count remote items newer than ``latest_id`` without materializing them."""

        count = sum(1 for _ in self._iter_new_items(latest_id))
        logger.info("Found %d new movies above id %d", count, latest_id)
        return count

    def fetch_new(self, latest_id: int, *, progress_total: int) -> list[MovieModel]:
        """Materialize every remote item newer than ``latest_id``, newest first."""

        new_movies: list[MovieModel] = []
        self._progress.start(progress_total)
        try:
            for item in self._iter_new_items(latest_id):
                new_movies.append(to_movie(item))
                self._progress.advance()
        finally:
            self._progress.finish()
        return new_movies

    def _iter_new_items(self, latest_id: int) -> Iterator[RemoteMovie]:
        # Additions upstream shift items onto the next page; yield each id once.
        seen: set[int] = set()
        page_number = 1
        while True:
            page = self._client.fetch_page(page_number)
            if page.is_empty:
                logger.debug("Page %d is empty; pagination finished", page_number)
                return
            for item in page.movies:
                if item.id <= latest_id:
                    logger.debug("Reached known movie %d on page %d", item.id, page_number)
                    return
                if item.id in seen:
                    logger.debug("Skipping movie %d repeated on page %d", item.id, page_number)
                    continue
                seen.add(item.id)
                yield item
            page_number += 1
