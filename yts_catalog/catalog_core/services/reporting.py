"""Read-only aggregates over the stored movie collection."""
from __future__ import annotations

from typing import Sequence

from ..schemas import CollectionStats, MovieModel, SizeSummary, TorrentModel


def largest_torrent(movie: MovieModel) -> TorrentModel | None:
    """Return the biggest torrent of ``movie``, or ``None`` when it has none."""

    if not movie.torrents:
        return None
    return max(movie.torrents, key=lambda torrent: torrent.size_bytes)


def size_summary(movies: Sequence[MovieModel]) -> SizeSummary:
    """Sum the largest torrent of every movie.

    Movies without torrents are left out of the average so an empty torrent
    list never causes a division by zero.
    """

    total_bytes = 0
    contributing = 0
    for movie in movies:
        torrent = largest_torrent(movie)
        if torrent is None:
            continue
        total_bytes += torrent.size_bytes
        contributing += 1

    return SizeSummary(
        movie_count=len(movies),
        contributing_count=contributing,
        total_bytes=total_bytes,
        average_bytes=total_bytes // contributing if contributing else None,
    )


def collection_stats(movies: Sequence[MovieModel]) -> CollectionStats:
    """Compute the summary shown by the ``stats`` command.

    ``movies`` must not be empty.
    """

    if not movies:
        raise ValueError("cannot compute statistics for an empty collection")

    ids = [movie.id for movie in movies]
    years = [movie.year for movie in movies]
    torrent_count = sum(len(movie.torrents) for movie in movies)

    return CollectionStats(
        movie_count=len(movies),
        torrent_count=torrent_count,
        average_torrents=torrent_count / len(movies),
        min_id=min(ids),
        max_id=max(ids),
        min_year=min(years),
        max_year=max(years),
        size=size_summary(movies),
    )
