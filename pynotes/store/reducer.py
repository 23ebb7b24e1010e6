"""
Pure state transitions for the notes collection.

``notes_reducer(state, intent)`` never performs I/O and never raises on
well-formed input. Intents it does not recognise leave the state untouched.
"""

from __future__ import annotations

import logging
from typing import Callable

from .domain import AddNote, Intent, Note, PopulateNotes, RemoveNote, Snapshot

LOGGER = logging.getLogger(__name__)

Reducer = Callable[[Snapshot, Intent], Snapshot]


def notes_reducer(state: Snapshot, intent: Intent) -> Snapshot:
    if isinstance(intent, PopulateNotes):
        return tuple(intent.notes)

    if isinstance(intent, AddNote):
        return state + (Note(title=intent.title, body=intent.body),)

    if isinstance(intent, RemoveNote):
        kept = tuple(note for note in state if note.title != intent.title)
        if len(kept) == len(state):
            return state
        return kept

    LOGGER.debug("notes.reducer.unknown_intent %r", intent)
    return state
