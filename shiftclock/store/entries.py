# shiftclock/store/entries.py
# Single-entry stores for the hourly wage & the in-progress timer state

from __future__ import annotations

import json

from ..core.constants import KEY_TIMER, KEY_WAGE
from ..core.types import TimerSnapshot
from ..core.wage import load_wage
from .generics import loads_json_safe
from .kv_store import KeyValueStore


# * Hourly wage persisted as a decimal string, independent of history
class WageStore:
    def __init__(self, store: KeyValueStore, key: str = KEY_WAGE) -> None:
        self._store = store
        self.key = key

    def load(self) -> float:
        return load_wage(self._store.get(self.key))

    # callers validate w/ parse_wage before saving
    def save(self, wage: float) -> None:
        self._store.set(self.key, repr(float(wage)))


# * Persisted timer snapshot; absent means idle w/ nothing banked
class TimerStateStore:
    def __init__(self, store: KeyValueStore, key: str = KEY_TIMER) -> None:
        self._store = store
        self.key = key

    def load(self) -> TimerSnapshot:
        raw = self._store.get(self.key)
        if raw is None:
            return TimerSnapshot()
        return TimerSnapshot.from_dict(loads_json_safe(raw, self.key), self.key)

    def save(self, snapshot: TimerSnapshot) -> None:
        self._store.set(self.key, json.dumps(snapshot.to_dict()))

    def clear(self) -> None:
        self._store.delete(self.key)
