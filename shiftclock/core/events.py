# shiftclock/core/events.py
# Typed reporters for the events shiftclock logs: timer transitions, store I/O, history changes, refresh & config

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import Category, OutputLevel, current_sink, install_sink, reset_sink
from .types import TimerState


# * --verbose alone gives VERBOSE; DEBUG also needs dev_mode
def level_for(verbose: bool, dev_mode: bool = False) -> OutputLevel:
    if not verbose:
        return OutputLevel.NORMAL
    return OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE


# * Install the console sink for this CLI run
def enable_output(
    verbose: bool = False, log_file: Path | None = None, dev_mode: bool = False
) -> None:
    # lazy import keeps core free of Rich
    from ..cli.log_sink import ConsoleSink

    current_sink().close()
    install_sink(ConsoleSink(level=level_for(verbose, dev_mode), log_file=log_file))


# * Close the installed sink (flushes the log file) & fall back to the null sink
def close_output() -> None:
    current_sink().close()
    reset_sink()


def timer_transition(
    action: str, before: TimerState, after: TimerState, elapsed: float
) -> None:
    current_sink().emit(
        Category.TIMER, f"{action}: {before.value} -> {after.value}", f"elapsed {elapsed:.3f}s"
    )


def store_read(path: Path, size: int) -> None:
    current_sink().emit(Category.STORE, f"read {path} ({size:,} bytes)")


def store_write(path: Path, size: int) -> None:
    current_sink().emit(Category.STORE, f"wrote {path} ({size:,} bytes)")


def history_changed(message: str, total: int) -> None:
    current_sink().emit(Category.HISTORY, message, f"{total} shift(s) stored")


def refresh_started(interval: float) -> None:
    current_sink().emit(Category.REFRESH, f"display refresh every {interval}s")


def refresh_stopped() -> None:
    current_sink().emit(Category.REFRESH, "display refresh stopped")


# per-tick trace; only shown at DEBUG
def refresh_tick(elapsed: float) -> None:
    current_sink().emit(
        Category.REFRESH, f"tick at {elapsed:.2f}s", level=OutputLevel.DEBUG
    )


def config_value(key: str, value: Any) -> None:
    current_sink().emit(Category.CONFIG, f"{key} = {value}")
