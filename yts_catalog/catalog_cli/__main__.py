"""Console entry point for the catalog CLI."""
from __future__ import annotations

from .app import app


def main() -> None:
    """Run the catalog CLI under its installed script name."""

    app(prog_name="yts-catalog")


if __name__ == "__main__":
    main()
