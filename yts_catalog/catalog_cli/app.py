"""Command line interface for the YTS catalog mirror."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..catalog_core.errors import CatalogError
from ..catalog_core.schemas import MovieModel
from ..catalog_core.services import (
    CatalogClient,
    NullProgress,
    SyncEngine,
    collection_stats,
    size_summary,
)
from ..catalog_core.settings import CatalogSettings
from ..catalog_core.stores.movie_store import MovieStore
from ..catalog_core.utils.formatting import format_optional_size, format_size, truncate_title
from .client import create_client
from .progress import RichProgress

app = typer.Typer(
    help="A toolkit for mirroring and inspecting the YTS movie catalog.",
    no_args_is_help=False,
)

EMPTY_DATABASE_MESSAGE = "No movies found in database. Run 'fetch' first."


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _settings(ctx: typer.Context) -> CatalogSettings:
    return ctx.ensure_object(CatalogSettings)


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def _load_movies(settings: CatalogSettings) -> list[MovieModel]:
    store = MovieStore(settings.database_path)
    if not store.exists():
        typer.echo(f"No database found at {store.path}.")
        return []
    try:
        return store.load()
    except CatalogError as exc:
        _fail(exc)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    database: Optional[Path] = typer.Option(
        None,
        "--database",
        "-d",
        help="JSON file holding the mirrored catalog.",
        envvar="YTS_CATALOG_DATABASE_PATH",
    ),
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        help="Listing endpoint of the remote catalog.",
        envvar="YTS_CATALOG_API_URL",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log catalog requests and store activity."
    ),
) -> None:
    """Fetch new movies when no command is given."""

    updates: dict[str, object] = {}
    if database is not None:
        updates["database_path"] = database
    if api_url is not None:
        updates["api_url"] = api_url
    if verbose:
        updates["log_level"] = "INFO"

    try:
        settings = CatalogSettings().model_copy(update=updates)
    except ValidationError as exc:
        _fail(exc)
    _configure_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _run_fetch(settings, show_progress=True)


@app.command()
def fetch(
    ctx: typer.Context,
    progress: bool = typer.Option(
        True,
        "--progress/--no-progress",
        help="Display a progress bar while fetching.",
        show_default=True,
    ),
) -> None:
    """Fetch new movies from the catalog (default action)."""

    _run_fetch(_settings(ctx), show_progress=progress)


def _run_fetch(settings: CatalogSettings, *, show_progress: bool) -> None:
    store = MovieStore(settings.database_path)
    sink = RichProgress() if show_progress else NullProgress()

    typer.echo("YTS movie grabber starting...")
    try:
        with create_client(
            timeout=settings.request_timeout, user_agent=settings.user_agent
        ) as http_client:
            engine = SyncEngine(
                CatalogClient.from_settings(settings, http_client), store, progress=sink
            )
            result = engine.run()
    except CatalogError as exc:
        _fail(exc)

    typer.echo(f"Total movies in catalog: {result.remote_count}")
    if result.latest_local_id > 0:
        typer.echo(f"Existing database: {result.previous_count} movies")
        typer.echo(f"Latest movie ID in database: {result.latest_local_id}")

    if result.up_to_date:
        typer.echo("Database is up to date! No new movies to fetch.")
        return

    typer.echo(f"Fetched {result.new_count} new movies")
    typer.echo(f"Successfully saved {result.total_count} total movies!")
    typer.echo(f"File: {store.path}")


@app.command("list")
def list_movies(
    ctx: typer.Context,
    limit: int = typer.Option(
        10, "--limit", "-l", min=0, help="Number of movies to display (0 = all)."
    ),
) -> None:
    """List movies from the local database."""

    movies = _load_movies(_settings(ctx))
    if not movies:
        typer.echo(EMPTY_DATABASE_MESSAGE)
        return

    shown = movies if limit == 0 else movies[:limit]
    console = Console()
    table = Table(title=f"Showing {len(shown)} of {len(movies)} movies")
    table.add_column("ID", justify="right", no_wrap=True)
    table.add_column("Title")
    table.add_column("Year", no_wrap=True)
    table.add_column("IMDb", no_wrap=True)
    table.add_column("Torrents", justify="right")
    table.add_column("Qualities")

    for movie in shown:
        table.add_row(
            str(movie.id),
            escape(truncate_title(movie.title)),
            str(movie.year),
            movie.imdb_code,
            str(len(movie.torrents)),
            escape(", ".join(torrent.quality for torrent in movie.torrents)),
        )

    console.print(table)


@app.command()
def count(ctx: typer.Context) -> None:
    """Count movies in the database."""

    movies = _load_movies(_settings(ctx))
    if not movies:
        typer.echo(EMPTY_DATABASE_MESSAGE)
        return

    ids = [movie.id for movie in movies]
    typer.echo(f"Total movies: {len(movies)}")
    typer.echo(f"Latest movie ID: {max(ids)}")
    typer.echo(f"Oldest movie ID: {min(ids)}")


@app.command()
def size(ctx: typer.Context) -> None:
    """Calculate the total size of all movies (largest torrent per movie)."""

    movies = _load_movies(_settings(ctx))
    if not movies:
        typer.echo(EMPTY_DATABASE_MESSAGE)
        return

    summary = size_summary(movies)
    typer.echo("Total database size (largest torrent per movie)")
    typer.echo(f"Total movies: {summary.movie_count}")
    typer.echo(f"Movies with torrents: {summary.contributing_count}")
    typer.echo(f"Combined size: {format_size(summary.total_bytes)}")
    typer.echo(f"Average size per movie: {format_optional_size(summary.average_bytes)}")


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show statistics about the database."""

    movies = _load_movies(_settings(ctx))
    if not movies:
        typer.echo(EMPTY_DATABASE_MESSAGE)
        return

    summary = collection_stats(movies)
    typer.echo("YTS database statistics")
    typer.echo(f"Movies:             {summary.movie_count}")
    typer.echo(f"Total torrents:     {summary.torrent_count}")
    typer.echo(f"Avg torrents/movie: {summary.average_torrents:.1f}")
    typer.echo(f"Year range:         {summary.min_year} - {summary.max_year}")
    typer.echo(f"Movie IDs:          {summary.min_id} to {summary.max_id}")
    typer.echo(f"Total size (largest/movie): {format_size(summary.size.total_bytes)}")
    typer.echo(
        f"Average size per movie:     {format_optional_size(summary.size.average_bytes)}"
    )
    typer.echo(f"Movies with torrents:       {summary.size.contributing_count}")
