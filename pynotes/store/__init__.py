"""Public API for the notes store."""

from .domain import AddNote, Intent, Note, PopulateNotes, RemoveNote, Snapshot
from .options import StoreConfig
from .persistence import LocalStorage, MemoryStorage, SlotSnapshotStorage, SnapshotStorage
from .reducer import notes_reducer
from .service import NoteStore

__all__ = [
    "NoteStore",
    "Note",
    "Snapshot",
    "Intent",
    "AddNote",
    "RemoveNote",
    "PopulateNotes",
    "notes_reducer",
    "SnapshotStorage",
    "LocalStorage",
    "SlotSnapshotStorage",
    "MemoryStorage",
    "StoreConfig",
]
