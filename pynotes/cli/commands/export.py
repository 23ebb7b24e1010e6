"""Export command for pynotes."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pynotes.cli.utils.store import get_store_instance
from pynotes.store.models import encode_snapshot

app = typer.Typer(help="Write notes as JSON")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    target: Optional[Path] = typer.Argument(
        None, help="Output file (default: standard output)"
    ),
):
    """Export notes in the same JSON shape `populate` accepts."""
    store = get_store_instance(ctx)
    payload = encode_snapshot(store.notes, indent=2)

    if target is None:
        typer.echo(payload)
        return

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] Could not write {target}: {exc}")
        raise typer.Exit(1)
    console.print(f"Exported [bold]{len(store)}[/bold] note(s) to {target}")
