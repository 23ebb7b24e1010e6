"""
Storage configuration for the notes store.

Values come from explicit arguments first, then the environment:
  PYNOTES_STORAGE      path of the key-value file
  PYNOTES_STORAGE_KEY  slot holding the notes snapshot
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .persistence import DEFAULT_SLOT


def default_storage_path() -> Path:
    return Path(os.path.expanduser("~/.config/pynotes")) / "storage.json"


@dataclass(frozen=True)
class StoreConfig:
    storage_path: Path
    storage_key: str = DEFAULT_SLOT

    @classmethod
    def from_env(
        cls,
        storage_path: Optional[Union[str, Path]] = None,
        storage_key: Optional[str] = None,
    ) -> "StoreConfig":
        path = storage_path or os.getenv("PYNOTES_STORAGE") or default_storage_path()
        key = storage_key or os.getenv("PYNOTES_STORAGE_KEY") or DEFAULT_SLOT
        return cls(storage_path=Path(path).expanduser(), storage_key=key)
