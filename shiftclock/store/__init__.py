# shiftclock/store/__init__.py
# Package initialization & exports for shiftclock persistence

from .generics import (
    ensure_parent,
    loads_json_safe,
    read_json_safe,
    read_text_safe,
    write_json_safe,
    write_text_atomic,
)
from .kv_store import KeyValueStore, MemoryStore, FileStore
from .entries import WageStore, TimerStateStore
from .history import ShiftHistoryStore
from .export import export_row, to_delimited

__all__ = [
    "ensure_parent",
    "loads_json_safe",
    "read_json_safe",
    "read_text_safe",
    "write_json_safe",
    "write_text_atomic",
    "KeyValueStore",
    "MemoryStore",
    "FileStore",
    "WageStore",
    "TimerStateStore",
    "ShiftHistoryStore",
    "export_row",
    "to_delimited",
]
