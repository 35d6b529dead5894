# shiftclock/store/history.py
# Most-recent-first shift history persisted as a JSON array under one store key

from __future__ import annotations

import json
from pathlib import Path

from ..core.constants import DEFAULT_EXPORT_FILENAME, KEY_HISTORY
from ..core.exceptions import CorruptRecordError, EmptyHistoryError
from ..core.types import ShiftRecord
from ..core.events import history_changed
from .export import to_delimited
from .generics import loads_json_safe, write_text_atomic
from .kv_store import KeyValueStore


# * Append-only, clearable log of completed shifts
# * Every mutation rewrites the whole sequence in one store write
class ShiftHistoryStore:
    def __init__(self, store: KeyValueStore, key: str = KEY_HISTORY) -> None:
        self._store = store
        self.key = key

    def _load(self) -> list[ShiftRecord]:
        raw = self._store.get(self.key)
        if raw is None:
            # first run: initialize the entry as an empty sequence
            self._save([])
            return []
        data = loads_json_safe(raw, self.key)
        if not isinstance(data, list):
            raise CorruptRecordError(
                f"History must be a JSON array, got {type(data).__name__}", self.key
            )
        return [ShiftRecord.from_dict(item, self.key) for item in data]

    def _save(self, records: list[ShiftRecord]) -> None:
        self._store.set(self.key, json.dumps([r.to_dict() for r in records]))

    # * Insert at the front (most recent first)
    def append(self, record: ShiftRecord) -> None:
        records = self._load()
        records.insert(0, record)
        self._save(records)
        history_changed(f"appended {record.formatted_time} shift", len(records))

    # * Drop every record; confirmation happens in the caller. Returns number removed
    def clear(self) -> int:
        count = len(self._load())
        self._save([])
        history_changed(f"cleared {count} shift(s)", 0)
        return count

    def list(self) -> list[ShiftRecord]:  # noqa: A003
        return self._load()

    def __len__(self) -> int:
        return len(self._load())

    # * Delimited export; refuses to produce a header-only table
    def export_delimited(self) -> str:
        records = self._load()
        if not records:
            raise EmptyHistoryError("No shifts to export.")
        return to_delimited(records)

    # * Write export to disk & return the path written
    def export_to(self, path: Path | str = DEFAULT_EXPORT_FILENAME) -> Path:
        text = self.export_delimited()
        out = Path(path)
        write_text_atomic(out, text)
        return out
