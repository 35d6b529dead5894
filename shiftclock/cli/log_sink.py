# shiftclock/cli/log_sink.py
# Rich console sink for diagnostic events w/ an optional plain-text log file

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import IO

from rich.markup import escape

from ..core.exceptions import FileWriteError
from ..core.output import Category, OutputLevel
from ..ui.console import console

# theme style per event source
_STYLES = {
    Category.TIMER: "state.running",
    Category.STORE: "shiftclock.accent2",
    Category.HISTORY: "shiftclock.money",
    Category.REFRESH: "debug",
    Category.CONFIG: "warning",
}


# * Prints events at or below its level; every printed event is also appended to the log file
class ConsoleSink:
    def __init__(
        self, level: OutputLevel = OutputLevel.VERBOSE, log_file: Path | None = None
    ) -> None:
        self.level = level
        self.log_file = log_file
        self._started = time.monotonic()
        self._log: IO[str] | None = self._open_log(log_file)

    def emit(
        self,
        category: Category,
        message: str,
        detail: str | None = None,
        *,
        level: OutputLevel = OutputLevel.VERBOSE,
    ) -> None:
        if level > self.level:
            return
        offset = f"+{time.monotonic() - self._started:.2f}s"
        console.print(
            f"[dim]{offset}[/] [{_STYLES[category]}]\\[{category.tag}][/] {escape(message)}",
            soft_wrap=True,
        )
        if detail:
            console.print(f"    [dim]{escape(detail)}[/]", soft_wrap=True)

        if self._log is not None:
            line = f"{datetime.now().isoformat(timespec='milliseconds')} {category.tag:<7} {message}"
            if detail:
                line += f" ({detail})"
            self._log.write(line + "\n")
            self._log.flush()

    def close(self) -> None:
        if self._log is not None:
            self._log.close()
            self._log = None

    @staticmethod
    def _open_log(path: Path | None) -> IO[str] | None:
        if path is None:
            return None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return open(path, "a", encoding="utf-8")
        except OSError as e:
            raise FileWriteError(f"Cannot open log file {path}: {e}", path)
