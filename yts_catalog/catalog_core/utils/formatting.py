"""Human readable formatting helpers."""
from __future__ import annotations

_UNITS = (
    ("TB", 1024**4),
    ("GB", 1024**3),
    ("MB", 1024**2),
    ("KB", 1024),
)


def format_size(num_bytes: int) -> str:
    """Render a byte count using 1024-based units with two decimals."""

    for label, factor in _UNITS:
        if num_bytes >= factor:
            return f"{num_bytes / factor:.2f} {label}"
    return f"{num_bytes} bytes"


def format_optional_size(num_bytes: int | None) -> str:
    if num_bytes is None:
        return "N/A"
    return format_size(num_bytes)


def truncate_title(title: str, width: int = 50) -> str:
    """Shorten ``title`` so it fits a column of ``width`` characters."""

    if len(title) <= width - 3:
        return title
    return f"{title[: width - 3]}..."
