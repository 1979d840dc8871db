"""Command line interface for the stage-two injector."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from zarf_injector.config import DEFAULT_DEST_DIR, InjectorConfig
from zarf_injector.pipeline import Injector


console = Console()
app = typer.Typer(help="Reassemble, verify and unpack the zarf stage-two payload")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def inject(
    sha256sum: Optional[str] = typer.Argument(
        None, help="Expected SHA256 (lowercase hex) of the merged payload"
    ),
    search_dir: Path = typer.Option(None, "--search-dir", help="Directory holding the payload shards"),
    dest: Path = typer.Option(DEFAULT_DEST_DIR, "--dest", help="Directory to unpack the payload into"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Merge zarf-payload-* shards and unpack them into the stage directory."""
    _setup_logging(verbose)
    config = InjectorConfig(search_dir=search_dir, dest_dir=dest)

    result = Injector(config).run(sha256sum)
    if not result.ok:
        console.print(f"[red]Error:[/red] {escape(str(result.error))}")
        raise typer.Exit(code=result.error.exit_code)

    stats = result.stats
    console.print(
        f"Shards: {stats.shards_read}, bytes: {stats.bytes_read}, "
        f"verified: {'yes' if stats.verified else 'skipped'}, "
        f"extracted: {stats.entries_extracted}, chmod: {stats.entries_normalized}"
    )
