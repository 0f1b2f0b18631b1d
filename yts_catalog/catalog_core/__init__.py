"""Core package for mirroring the YTS movie catalog into a local JSON file."""

from .errors import CatalogClientError, CatalogError, MovieStoreError
from .settings import CatalogSettings
from .stores.movie_store import MovieStore

__all__ = [
    "CatalogClientError",
    "CatalogError",
    "CatalogSettings",
    "MovieStore",
    "MovieStoreError",
]
