"""Shared fixtures: a fake paginated catalog and stored-movie builders."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from yts_catalog.catalog_core.schemas import MovieModel, TorrentModel  # noqa: E402
from yts_catalog.catalog_core.services import CatalogClient  # noqa: E402
from yts_catalog.catalog_core.utils.magnet import build_magnet_url  # noqa: E402

API_URL = "https://catalog.test/api/v2/list_movies.json"


def remote_movie(
    movie_id: int,
    *,
    title: str | None = None,
    year: int = 2020,
    torrents: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a listing item shaped like the remote API payload."""

    if torrents is None:
        torrents = [
            {
                "quality": "720p",
                "type": "web",
                "hash": f"HASH{movie_id}A",
                "size_bytes": 700 * 1024 * 1024,
                "size": "700 MB",
            },
            {
                "quality": "1080p",
                "type": "bluray",
                "hash": f"HASH{movie_id}B",
                "size_bytes": 2 * 1024**3,
                "size": "2.00 GB",
            },
        ]
    return {
        "id": movie_id,
        "url": f"https://catalog.test/movies/{movie_id}",
        "title": title or f"Movie {movie_id}",
        "year": year,
        "imdb_code": f"tt{movie_id:07d}",
        "torrents": torrents,
    }


def stored_movie(
    movie_id: int,
    *,
    title: str | None = None,
    year: int = 2020,
    sizes: list[int] | None = None,
) -> MovieModel:
    """Build a movie as it would appear in the local database."""

    name = title or f"Movie {movie_id}"
    torrents = [
        TorrentModel(
            quality=f"{720 + index * 360}p-web",
            hash=f"STORED{movie_id}{index}",
            size_bytes=size,
            magnet_url=build_magnet_url(f"STORED{movie_id}{index}", name),
        )
        for index, size in enumerate(sizes if sizes is not None else [1024**3])
    ]
    return MovieModel(id=movie_id, title=name, year=year, imdb_code=f"tt{movie_id:07d}", torrents=torrents)


class FakeCatalog:
    """In-memory listing endpoint served through ``httpx.MockTransport``."""

    def __init__(
        self,
        pages: list[list[dict[str, Any]]],
        *,
        movie_count: int | None = None,
        fail_after: int | None = None,
        later_pages: list[list[dict[str, Any]]] | None = None,
        switch_after: int | None = None,
    ) -> None:
        self.pages = pages
        self.later_pages = later_pages
        self.switch_after = switch_after
        self.movie_count = (
            movie_count if movie_count is not None else sum(len(page) for page in pages)
        )
        self.fail_after = fail_after
        self.requested: list[int] = []
        self.params: list[dict[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        page = int(request.url.params["page"])
        self.requested.append(page)
        self.params.append(dict(request.url.params))
        if self.fail_after is not None and len(self.requested) > self.fail_after:
            return httpx.Response(503, json={"status": "error"})

        pages = self.pages
        if self.later_pages is not None and len(self.requested) > (self.switch_after or 0):
            pages = self.later_pages

        data: dict[str, Any] = {"movie_count": self.movie_count, "limit": 50, "page_number": page}
        if page <= len(pages) and pages[page - 1]:
            data["movies"] = pages[page - 1]
        return httpx.Response(200, json={"status": "ok", "data": data})

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def client(self) -> CatalogClient:
        return CatalogClient(self.http_client(), api_url=API_URL)


@pytest.fixture()
def make_catalog() -> Callable[..., FakeCatalog]:
    return FakeCatalog


@pytest.fixture()
def make_remote_movie() -> Callable[..., dict[str, Any]]:
    return remote_movie


@pytest.fixture()
def make_stored_movie() -> Callable[..., MovieModel]:
    return stored_movie
