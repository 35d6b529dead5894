# shiftclock/store/kv_store.py
# Key-value persistence: one file per key on disk, or a dict in memory

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.exceptions import FileWriteError
from .generics import read_text_safe, write_text_atomic

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


# * Minimal string key-value store (the shape of browser localStorage)
@runtime_checkable
class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


def _check_key(key: str) -> str:
    if not _KEY_RE.match(key) or key.startswith("."):
        raise ValueError(f"Invalid store key: {key!r}")
    return key


# * In-process store for embedding & tests
class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(_check_key(key))

    def set(self, key: str, value: str) -> None:
        self._data[_check_key(key)] = value

    def delete(self, key: str) -> None:
        self._data.pop(_check_key(key), None)


# * Directory-backed store; each entry is replaced atomically on write
class FileStore:
    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / _check_key(key)

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return read_text_safe(path)

    def set(self, key: str, value: str) -> None:
        write_text_atomic(self.path_for(key), value)

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise FileWriteError(f"Cannot remove {path}: {e}", path)
