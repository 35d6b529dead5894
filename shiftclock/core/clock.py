# shiftclock/core/clock.py
# Wall-clock abstraction injected into timers & sessions

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


# * Anything that can report the current wall-clock time in epoch seconds
@runtime_checkable
class Clock(Protocol):
    def now(self) -> float: ...


# * Real wall clock; persisted segment starts are compared across processes
class SystemClock:
    def now(self) -> float:
        return time.time()
