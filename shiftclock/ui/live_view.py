# shiftclock/ui/live_view.py
# Interactive live timer view: Rich Live panel refreshed by the session's refresh task, driven by single keypresses

from __future__ import annotations

from threading import Lock
from typing import Callable

from readchar import readkey, key
from rich.live import Live

from ..core.exceptions import ShiftClockError, format_error_message
from ..core.formatting import format_hms, format_money
from ..core.session import ShiftSession
from ..core.types import DisplaySnapshot
from .console import get_console
from .display import notice_line, render_live, success_line

QUIT_KEYS = {"q", "Q", key.ESC, key.CTRL_C}


class LiveShiftView:
    def __init__(self, session: ShiftSession, read_key: Callable[[], str] = readkey) -> None:
        self.session = session
        self._read_key = read_key
        self._live: Live | None = None
        self._message: str | None = None
        # refresh ticks arrive on the scheduler thread
        self._render_lock = Lock()
        self._actions: dict[str, Callable[[], str]] = {
            "s": self._start,
            "p": self._pause,
            "r": self._resume,
            "e": self._end,
            "x": self._reset,
        }

    @property
    def message(self) -> str | None:
        return self._message

    # * Handle one keypress. Returns False to exit the loop
    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            return False
        action = self._actions.get(k.lower())
        if action is None:
            return True
        try:
            self._message = action()
        except ShiftClockError as e:
            self._message = format_error_message("Error", str(e))
        self._render(self.session.display())
        return True

    # * Run until quit; refresh task only ticks while the timer is running
    def run(self) -> None:
        with Live(
            render_live(self.session.display(), self._message),
            console=get_console(),
            auto_refresh=False,
            transient=False,
        ) as live:
            self._live = live
            self.session.attach_display(self._render)
            try:
                while self.handle_key(self._read_key()):
                    pass
            finally:
                self.session.detach_display()
                self._live = None

    def _render(self, snapshot: DisplaySnapshot) -> None:
        if self._live is None:
            return
        with self._render_lock:
            self._live.update(render_live(snapshot, self._message), refresh=True)

    # ===== ACTIONS =====

    def _start(self) -> str:
        if self.session.start():
            return success_line("Shift started")
        return notice_line("A shift is already in progress")

    def _pause(self) -> str:
        if self.session.pause():
            return success_line("Paused")
        return notice_line("Nothing to pause")

    def _resume(self) -> str:
        if self.session.resume():
            return success_line("Resumed")
        return notice_line("Nothing to resume")

    def _end(self) -> str:
        record = self.session.end()
        if record is None:
            return notice_line("No shift in progress")
        return success_line(
            "Shift saved",
            f"{format_hms(record.duration_seconds)} • {format_money(record.amount)}",
        )

    def _reset(self) -> str:
        if self.session.reset():
            return success_line("Timer reset")
        return notice_line("Reset is only available while paused")
