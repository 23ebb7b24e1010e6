"""List command for pynotes."""

import typer
from rich.console import Console

from pynotes.cli.utils.store import get_store_instance, print_notes

app = typer.Typer(help="List notes")
console = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """List all notes in insertion order."""
    store = get_store_instance(ctx)
    print_notes(console, store.notes)
