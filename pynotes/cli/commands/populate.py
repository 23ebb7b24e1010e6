"""Populate command for pynotes."""

from pathlib import Path

import typer
from rich.console import Console

from pynotes.cli.utils.store import get_store_instance
from pynotes.exceptions import MalformedSnapshot
from pynotes.store.models import decode_snapshot

app = typer.Typer(help="Replace all notes with the contents of a JSON file")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    source: Path = typer.Argument(
        ..., help="JSON file holding a list of {title, body} objects"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Replace without confirmation"
    ),
):
    """Replace the whole list with the notes in SOURCE."""
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] Could not read {source}: {exc}")
        raise typer.Exit(1)

    try:
        notes = decode_snapshot(raw)
    except MalformedSnapshot as exc:
        console.print(
            f"[bold red]Error:[/bold red] Not a notes list: {source} ({exc.reason})"
        )
        raise typer.Exit(1)

    if notes is None:
        console.print(f"[yellow]Warning:[/yellow] {source} holds no notes")
        return

    store = get_store_instance(ctx)
    if len(store) and not force:
        confirmed = typer.confirm(
            f"Replace {len(store)} existing note(s) with {len(notes)}?", default=False
        )
        if not confirmed:
            console.print("Populate cancelled")
            return

    store.populate(notes)
    console.print(f"Loaded [bold]{len(notes)}[/bold] note(s) from {source}")
