# shiftclock/core/output.py
# Diagnostic levels, event categories & the sink registry core modules report to
# * No I/O here; the Rich/log-file sink lives in shiftclock/cli/log_sink.py & is installed at CLI startup

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Protocol, runtime_checkable


# * How much of the event stream reaches the user
class OutputLevel(IntEnum):
    # command results only
    NORMAL = 0
    # timer transitions, store reads/writes, refresh start/stop, config values
    VERBOSE = 1
    # plus every refresh tick; needs dev_mode
    DEBUG = 2


# * Source of an event; the console sink styles each one differently
class Category(str, Enum):
    TIMER = "timer"
    STORE = "store"
    HISTORY = "history"
    REFRESH = "refresh"
    CONFIG = "config"

    @property
    def tag(self) -> str:
        return self.value.upper()


@runtime_checkable
class EventSink(Protocol):
    level: OutputLevel

    def emit(
        self,
        category: Category,
        message: str,
        detail: str | None = None,
        *,
        level: OutputLevel = OutputLevel.VERBOSE,
    ) -> None: ...

    def close(self) -> None: ...


# * Sink in place until the CLI installs one; drops every event
class NullSink:
    level = OutputLevel.NORMAL

    def emit(
        self,
        category: Category,
        message: str,
        detail: str | None = None,
        *,
        level: OutputLevel = OutputLevel.VERBOSE,
    ) -> None:
        pass

    def close(self) -> None:
        pass


_sink: EventSink = NullSink()


def install_sink(sink: EventSink) -> None:
    global _sink
    _sink = sink


def current_sink() -> EventSink:
    return _sink


# drop back to the null sink (CLI teardown & tests)
def reset_sink() -> None:
    global _sink
    _sink = NullSink()
