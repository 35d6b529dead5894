# shiftclock/cli/helpers.py
# Shared CLI helpers for building sessions from settings & printing action results

from __future__ import annotations

from ..config.settings import ShiftClockSettings
from ..core.session import ShiftSession, DisplaySink
from ..store.kv_store import FileStore
from ..ui.console import console
from ..ui.display import notice_line, success_line


# * Store rooted at the configured data directory
def open_store(settings: ShiftClockSettings) -> FileStore:
    return FileStore(settings.data_path)


# * Session over the configured store; one-shot commands pass no display sink
def build_session(
    settings: ShiftClockSettings, display: DisplaySink | None = None
) -> ShiftSession:
    return ShiftSession(
        open_store(settings),
        display=display,
        refresh_interval=settings.refresh_interval,
    )


def print_success(label: str, detail: str = "") -> None:
    console.print(success_line(label, detail), soft_wrap=True)


def print_notice(message: str) -> None:
    console.print(notice_line(message), soft_wrap=True)

