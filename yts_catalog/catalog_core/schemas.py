"""Pydantic models for the remote catalog payloads and the local collection."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RemoteTorrent(BaseModel):
    """Torrent descriptor as returned by the listing endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    quality: str
    torrent_type: str = Field(alias="type", description="Encoding tag such as bluray or web.")
    hash: str
    size_bytes: int = Field(ge=0)
    size: str | None = Field(default=None, description="Human readable size, e.g. 1.2 GB.")


class RemoteMovie(BaseModel):
    """Movie item as returned by the listing endpoint."""

    id: int
    title: str
    year: int
    imdb_code: str
    torrents: list[RemoteTorrent] = Field(default_factory=list)


class ListMoviesData(BaseModel):
    movie_count: int = Field(ge=0)
    movies: list[RemoteMovie] | None = None


class ListMoviesResponse(BaseModel):
    """Envelope of a ``list_movies.json`` response."""

    data: ListMoviesData


class CatalogPage(BaseModel):
    """A single decoded page of the remote listing."""

    page: int = Field(ge=1)
    movie_count: int = Field(ge=0, description="Total number of movies reported by the remote.")
    movies: list[RemoteMovie] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.movies


class TorrentModel(BaseModel):
    """Torrent stored in the local collection."""

    model_config = ConfigDict(frozen=True)

    quality: str = Field(description="Resolution and encoding combined, e.g. 1080p-bluray.")
    hash: str
    size_bytes: int = Field(ge=0)
    magnet_url: str
    size: str | None = None


class MovieModel(BaseModel):
    """Movie stored in the local collection."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    year: int
    imdb_code: str
    torrents: tuple[TorrentModel, ...] = Field(default_factory=tuple)


class SizeSummary(BaseModel):
    """Aggregate of the largest torrent of every movie."""

    movie_count: int
    contributing_count: int = Field(
        description="Movies with at least one torrent, used as the average denominator."
    )
    total_bytes: int
    average_bytes: int | None = Field(
        default=None, description="Average largest-torrent size, unset when nothing contributes."
    )


class CollectionStats(BaseModel):
    """Summary statistics exposed by the ``stats`` command."""

    movie_count: int
    torrent_count: int
    average_torrents: float
    min_id: int
    max_id: int
    min_year: int
    max_year: int
    size: SizeSummary
