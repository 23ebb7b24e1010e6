"""Helpers shared by the pynotes CLI commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from pynotes.store import LocalStorage, NoteStore, SlotSnapshotStorage, StoreConfig
from pynotes.store.domain import Snapshot


def get_store_instance(ctx: Optional[typer.Context] = None) -> NoteStore:
    """Build a NoteStore for this invocation from --storage and the environment."""
    storage_path = None
    if ctx is not None and ctx.obj:
        storage_path = ctx.obj.get("storage")
    config = StoreConfig.from_env(storage_path=storage_path)
    storage = SlotSnapshotStorage(
        LocalStorage(config.storage_path), key=config.storage_key
    )
    return NoteStore(storage)


def print_notes(console: Console, notes: Snapshot) -> None:
    """Render a snapshot as a table."""
    if not notes:
        console.print("No notes found")
        return

    table = Table("Title", "Body")
    for note in notes:
        table.add_row(Text(note.title), Text(note.body))
    console.print(table)
