"""pynotes: a small persisted notes list."""

from pynotes.store import (
    AddNote,
    LocalStorage,
    MemoryStorage,
    Note,
    NoteStore,
    PopulateNotes,
    RemoveNote,
    SlotSnapshotStorage,
)

__all__ = [
    "NoteStore",
    "Note",
    "AddNote",
    "RemoveNote",
    "PopulateNotes",
    "LocalStorage",
    "SlotSnapshotStorage",
    "MemoryStorage",
]
