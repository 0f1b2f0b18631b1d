"""Service layer for syncing and reporting on the catalog."""

from .catalog_client import CatalogClient
from .reporting import collection_stats, largest_torrent, size_summary
from .sync_engine import NullProgress, ProgressSink, SyncEngine, SyncResult

__all__ = [
    "CatalogClient",
    "collection_stats",
    "largest_torrent",
    "size_summary",
    "NullProgress",
    "ProgressSink",
    "SyncEngine",
    "SyncResult",
]
