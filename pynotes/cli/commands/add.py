"""Add command for pynotes."""

import typer
from rich.console import Console
from rich.markup import escape

from pynotes.cli.utils.store import get_store_instance, print_notes

app = typer.Typer(help="Add a note")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title of the note"),
    body: str = typer.Argument("", help="Body of the note"),
):
    """Append a note to the end of the list."""
    store = get_store_instance(ctx)
    store.subscribe(lambda notes: print_notes(console, notes))

    store.add_note(title, body)
    console.print(f"Added note [bold]{escape(title)}[/bold]")
