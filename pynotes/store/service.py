"""
NoteStore: the owner of the notes collection.

Public API:
  - NoteStore(storage) restores from ``storage.load_snapshot()`` once
  - NoteStore.notes -> Tuple[Note, ...]
  - NoteStore.dispatch(intent) -> Tuple[Note, ...]
  - NoteStore.populate(notes) / add_note(title, body) / remove_note(title)
  - NoteStore.subscribe(callback) -> unsubscribe

Every transition runs the reducer, notifies subscribers with the new
snapshot, then writes the snapshot through to storage.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List

from .domain import AddNote, Intent, Note, PopulateNotes, RemoveNote, Snapshot
from .persistence import SnapshotStorage
from .reducer import Reducer, notes_reducer

LOGGER = logging.getLogger(__name__)

Subscriber = Callable[[Snapshot], None]


class NoteStore:
    """Ordered notes collection with write-through persistence."""

    def __init__(self, storage: SnapshotStorage, *, reducer: Reducer = notes_reducer):
        self._storage = storage
        self._reducer = reducer
        self._notes: Snapshot = ()
        self._subscribers: List[Subscriber] = []
        self._restore()

    def _restore(self) -> None:
        restored = self._storage.load_snapshot()
        if restored is None:
            LOGGER.debug("notes.store.restore nothing stored")
            return
        LOGGER.debug("notes.store.restore notes=%d", len(restored))
        self.populate(restored)

    # -------------------------- Public API methods ---------------------------

    @property
    def notes(self) -> Snapshot:
        return self._notes

    def dispatch(self, intent: Intent) -> Snapshot:
        """Apply ``intent``, notify subscribers, then persist the new snapshot."""
        previous = len(self._notes)
        self._notes = self._reducer(self._notes, intent)
        LOGGER.debug(
            "notes.store.dispatch %s notes=%d->%d",
            getattr(intent, "kind", type(intent).__name__),
            previous,
            len(self._notes),
        )
        try:
            for callback in list(self._subscribers):
                callback(self._notes)
        finally:
            self._storage.save_snapshot(self._notes)
        return self._notes

    def populate(self, notes: Iterable[Note]) -> Snapshot:
        return self.dispatch(PopulateNotes(notes=tuple(notes)))

    def add_note(self, title: str, body: str = "") -> Snapshot:
        return self.dispatch(AddNote(title=title, body=body))

    def remove_note(self, title: str) -> Snapshot:
        """Remove every note titled ``title``; duplicates all go."""
        return self.dispatch(RemoveNote(title=title))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call ``callback(snapshot)`` after each transition.
        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __repr__(self) -> str:
        return f"NoteStore(notes={len(self._notes)})"
