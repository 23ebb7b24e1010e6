"""Public exports for snapshot wire models."""

from __future__ import annotations

from .snapshot import NOTES_ADAPTER, StoredNote, decode_snapshot, encode_snapshot

__all__ = [
    "StoredNote",
    "NOTES_ADAPTER",
    "decode_snapshot",
    "encode_snapshot",
]
