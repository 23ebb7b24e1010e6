"""
Snapshot persistence for the notes store.

Defines the storage seam (`SnapshotStorage`) the store consumes:
  - load_snapshot() returns the last stored collection, or None, and
  - save_snapshot(notes) overwrites it.

Shipped adapters:
  - SlotSnapshotStorage: JSON-encoded snapshot under one key of a
    `LocalStorage` file (the browser localStorage model: string keys,
    string values).
  - MemoryStorage: keeps the snapshot in the process, for tests and
    throwaway stores.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union

from pydantic_core import PydanticSerializationError

from pynotes.exceptions import MalformedSnapshot

from .domain import Note, Snapshot
from .models import decode_snapshot, encode_snapshot

LOGGER = logging.getLogger(__name__)

DEFAULT_SLOT = "notes"


class SnapshotStorage(Protocol):
    """Minimal persistence seam required by NoteStore."""

    def load_snapshot(self) -> Optional[Snapshot]: ...

    def save_snapshot(self, notes: Snapshot) -> None: ...


class LocalStorage:
    """A JSON file holding a flat string-to-string map."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            LOGGER.warning("Could not read storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning(
                "Storage file %s does not hold an object; ignoring it", self.path
            )
            return {}
        dropped = sorted(k for k, v in data.items() if not isinstance(v, str))
        if dropped:
            LOGGER.warning(
                "Ignoring non-string slots in %s: %s", self.path, ", ".join(dropped)
            )
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        # Encode fully before touching the file; replace it in one step.
        payload = json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        self._write({})

    def keys(self) -> List[str]:
        return list(self._read().keys())

    def __len__(self) -> int:
        return len(self._read())

    def __contains__(self, key: str) -> bool:
        return key in self._read()


class SlotSnapshotStorage:
    """
    Keep the snapshot as a JSON array string in one LocalStorage slot.

    A missing slot or a stored ``null`` means "no prior state". Anything that
    does not decode to a list of ``{title, body}`` strings is logged and also
    treated as no prior state. Write errors are logged and dropped.
    """

    def __init__(self, storage: LocalStorage, *, key: str = DEFAULT_SLOT):
        self.storage = storage
        self.key = key

    def load_snapshot(self) -> Optional[Snapshot]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            LOGGER.debug("notes.storage.load slot=%s missing", self.key)
            return None
        try:
            notes = decode_snapshot(raw)
        except MalformedSnapshot as exc:
            LOGGER.warning(
                "Discarding malformed snapshot in slot %r: %s", self.key, exc.reason
            )
            return None
        LOGGER.debug(
            "notes.storage.load slot=%s notes=%s",
            self.key,
            "null" if notes is None else len(notes),
        )
        return notes

    def save_snapshot(self, notes: Snapshot) -> None:
        try:
            payload = encode_snapshot(notes)
            self.storage.set_item(self.key, payload)
        except (OSError, PydanticSerializationError, ValueError) as exc:
            LOGGER.warning("Could not save snapshot to %s: %s", self.storage.path, exc)
            return
        LOGGER.debug("notes.storage.save slot=%s notes=%d", self.key, len(notes))


class MemoryStorage:
    """In-process snapshot storage."""

    def __init__(self, initial: Optional[Iterable[Note]] = None):
        self._snapshot: Optional[Snapshot] = (
            tuple(initial) if initial is not None else None
        )
        self.save_count = 0

    def load_snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    def save_snapshot(self, notes: Snapshot) -> None:
        self._snapshot = tuple(notes)
        self.save_count += 1
