"""Remove command for pynotes."""

import typer
from rich.console import Console
from rich.markup import escape

from pynotes.cli.utils.store import get_store_instance, print_notes

app = typer.Typer(help="Remove notes by title")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title of the note(s) to remove"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Remove without confirmation"
    ),
):
    """Remove every note with the given title."""
    store = get_store_instance(ctx)
    matches = sum(1 for note in store if note.title == title)

    if not matches:
        console.print(f"[yellow]Warning:[/yellow] No note titled {escape(title)}")
        return

    if not force:
        confirmed = typer.confirm(
            f"Remove {matches} note(s) titled {title!r}?", default=False
        )
        if not confirmed:
            console.print("Removal cancelled")
            return

    store.subscribe(lambda notes: print_notes(console, notes))
    store.remove_note(title)
    console.print(f"Removed {matches} note(s) titled [bold]{escape(title)}[/bold]")
