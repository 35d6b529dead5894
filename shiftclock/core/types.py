# shiftclock/core/types.py
# Timer state enum & immutable data structures for shift records, timer snapshots & live display

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import CorruptRecordError
from .formatting import amount_for, format_hms, iso_timestamp


# * Timer lifecycle states
class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


# * Completed shift; created once on end & never mutated
@dataclass(frozen=True)
class ShiftRecord:
    timestamp: str
    duration_seconds: int
    amount: float
    wage_at_end: float

    # build record for a shift ending at epoch `ended_at`
    @classmethod
    def create(
        cls, *, ended_at: float, duration_seconds: int, wage: float
    ) -> "ShiftRecord":
        return cls(
            timestamp=iso_timestamp(ended_at),
            duration_seconds=duration_seconds,
            amount=amount_for(duration_seconds, wage),
            wage_at_end=wage,
        )

    @property
    def formatted_time(self) -> str:
        return format_hms(self.duration_seconds)

    # persisted form keeps the short keys of the original history format
    def to_dict(self) -> dict[str, Any]:
        return {
            "ts": self.timestamp,
            "seconds": self.duration_seconds,
            "amount": self.amount,
            "wage": self.wage_at_end,
        }

    @classmethod
    def from_dict(cls, data: Any, key: str = "history") -> "ShiftRecord":
        if not isinstance(data, dict):
            raise CorruptRecordError(f"Shift record must be an object, got {data!r}", key)
        missing = [k for k in ("ts", "seconds", "amount", "wage") if k not in data]
        if missing:
            raise CorruptRecordError(
                f"Shift record missing fields: {', '.join(missing)}", key
            )
        try:
            return cls(
                timestamp=str(data["ts"]),
                duration_seconds=int(data["seconds"]),
                amount=float(data["amount"]),
                wage_at_end=float(data["wage"]),
            )
        except (TypeError, ValueError) as e:
            raise CorruptRecordError(f"Invalid shift record {data!r}: {e}", key)


# * Serializable timer state so a running shift survives between CLI invocations
@dataclass(frozen=True)
class TimerSnapshot:
    state: TimerState = TimerState.IDLE
    accumulated: float = 0.0
    segment_start: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.value,
            "accumulated": self.accumulated,
            "segment_start": self.segment_start,
        }

    @classmethod
    def from_dict(cls, data: Any, key: str = "timer") -> "TimerSnapshot":
        if not isinstance(data, dict):
            raise CorruptRecordError(f"Timer state must be an object, got {data!r}", key)
        try:
            state = TimerState(data.get("state", TimerState.IDLE.value))
            accumulated = float(data.get("accumulated", 0.0))
            segment_start = data.get("segment_start")
            if segment_start is not None:
                segment_start = float(segment_start)
        except (TypeError, ValueError) as e:
            raise CorruptRecordError(f"Invalid timer state {data!r}: {e}", key)

        # segment_start only has meaning while running
        if state is TimerState.RUNNING and segment_start is None:
            raise CorruptRecordError("Running timer state has no segment start", key)
        if state is not TimerState.RUNNING:
            segment_start = None
        return cls(state=state, accumulated=max(0.0, accumulated), segment_start=segment_start)


# * Live display values pushed to the display sink on every refresh
@dataclass(frozen=True)
class DisplaySnapshot:
    state: TimerState
    elapsed_seconds: float
    earned: float
    wage: float

    @property
    def formatted_elapsed(self) -> str:
        return format_hms(self.elapsed_seconds)
