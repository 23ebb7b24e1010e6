"""Wire format of a stored notes snapshot."""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter, ValidationError

from pynotes.exceptions import MalformedSnapshot

from ..domain import Note, Snapshot


class StoredNote(BaseModel):
    """One ``{"title": ..., "body": ...}`` object inside the stored array."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: StrictStr
    body: StrictStr

    @classmethod
    def from_note(cls, note: Note) -> "StoredNote":
        return cls(title=note.title, body=note.body)

    def to_note(self) -> Note:
        return Note(title=self.title, body=self.body)


# A literal JSON ``null`` is a valid "nothing stored" value.
NOTES_ADAPTER: TypeAdapter[Optional[List[StoredNote]]] = TypeAdapter(
    Optional[List[StoredNote]]
)


def decode_snapshot(raw: Union[str, bytes]) -> Optional[Snapshot]:
    """Parse a JSON snapshot; ``None`` for ``null``, MalformedSnapshot otherwise."""
    try:
        stored = NOTES_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise MalformedSnapshot(
            f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}",
            raw=raw,
        ) from exc
    if stored is None:
        return None
    return tuple(item.to_note() for item in stored)


def encode_snapshot(notes: Iterable[Note], *, indent: Optional[int] = None) -> str:
    """Serialise notes to the JSON array stored in the notes slot."""
    stored = [StoredNote.from_note(note) for note in notes]
    return NOTES_ADAPTER.dump_json(stored, indent=indent).decode("utf-8")
