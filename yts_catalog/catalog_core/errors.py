"""Exception hierarchy shared by the catalog services and stores."""
from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for failures that abort a catalog command."""


class CatalogClientError(CatalogError):
    """Raised when the remote catalog cannot be fetched or decoded."""


class MovieStoreError(CatalogError):
    """Raised when the local movie database cannot be read or written."""
