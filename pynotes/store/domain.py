# pynotes/store/domain.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence, Tuple, Union


@dataclass(frozen=True)
class Note:
    title: str
    body: str = ""


Snapshot = Tuple[Note, ...]


@dataclass(frozen=True)
class PopulateNotes:
    """Replace the whole collection with ``notes`` as given."""

    kind: ClassVar[str] = "POPULATE_NOTES"

    notes: Sequence[Note]


@dataclass(frozen=True)
class AddNote:
    """Append a note to the end of the collection."""

    kind: ClassVar[str] = "ADD_NOTE"

    title: str
    body: str = ""


@dataclass(frozen=True)
class RemoveNote:
    """Drop every note whose title equals ``title``."""

    kind: ClassVar[str] = "REMOVE_NOTE"

    title: str


Intent = Union[PopulateNotes, AddNote, RemoveNote]
