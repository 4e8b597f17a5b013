"""Listing crawler CLI.

Usage:
    python cli/main.py --help

Commands:
    crawl    → fetch the listing pages and save one JSON file per item
    extract  → run item extraction over a saved HTML page
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from listings.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from listings.config import settings
from listings.scraper import CrawlError, build_start_url, crawl, extract_file

app = typer.Typer(
    name="listings",
    help="Crawl a paginated product listing and save one JSON record per item.",
    no_args_is_help=True,
)


@app.command("crawl")
def crawl_cmd(
    condition: Optional[int] = typer.Option(
        None, "--condition", help="Item condition filter. Possible values are: 3, 4 or 10."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Listing URL to start from."),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Output directory."),
) -> None:
    """Crawl every page of the listing and write ``<data-dir>/<id>.json`` per item."""
    start_url = build_start_url(url or settings.base_url, condition)
    typer.echo(f"[crawl] Starting at {start_url!r} …")
    try:
        summary = crawl(start_url, data_dir)
    except CrawlError as exc:
        typer.echo(f"[crawl] ERROR: {exc}")
        raise typer.Exit(1)

    typer.echo(f"[crawl] Pages  : {summary.pages}")
    typer.echo(f"[crawl] Saved  : {summary.items_saved}")
    typer.echo(f"[crawl] Skipped: {summary.items_skipped}")


@app.command("extract")
def extract_cmd(
    path: Path = typer.Argument(..., help="Saved listing page (HTML)."),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Output directory."),
) -> None:
    """Extract the items of a saved listing page without fetching anything."""
    if not path.is_file():
        typer.echo(f"[extract] ❌ No such file: {path}")
        raise typer.Exit(code=1)

    html = path.read_text(encoding="utf-8", errors="replace")
    try:
        summary = extract_file(html, data_dir)
    except CrawlError as exc:
        typer.echo(f"[extract] ERROR: {exc}")
        raise typer.Exit(1)

    typer.echo(f"[extract] Found {summary.items_found} items, saved {summary.items_saved}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
