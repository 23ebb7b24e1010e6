#!/usr/bin/env python
"""Command line interface for pynotes."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pynotes.cli.commands import add, export, list_notes, populate, remove

app = typer.Typer(help="Keep a small list of notes")

app.add_typer(list_notes.app, name="list")
app.add_typer(add.app, name="add")
app.add_typer(remove.app, name="remove")
app.add_typer(populate.app, name="populate")
app.add_typer(export.app, name="export")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    logging.getLogger("pynotes").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


@app.callback()
def callback(
    ctx: typer.Context,
    storage: Optional[Path] = typer.Option(
        None,
        "--storage",
        help="Storage file (default: $PYNOTES_STORAGE or ~/.config/pynotes/storage.json)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """Add, remove and list notes persisted on disk."""
    _configure_logging(verbose)
    ctx.obj = {"storage": storage}


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
