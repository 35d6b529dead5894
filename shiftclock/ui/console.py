# shiftclock/ui/console.py
# Shared Rich console w/ the shiftclock theme
#
# Modules import `console` & print through it. Tests swap the Console behind it via use_console()
# (e.g. a recording console) without touching those imports.

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.theme import Theme

# * Named styles used in markup across commands, the live view & the log sink
THEME = Theme(
    {
        "shiftclock.accent": "bold cyan",
        "shiftclock.accent2": "cyan",
        "shiftclock.money": "bold green",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim magenta",
        "state.idle": "dim",
        "state.running": "bold green",
        "state.paused": "bold yellow",
    }
)


def make_console(**options: Any) -> Console:
    return Console(theme=THEME, **options)


# * Stable handle forwarding to whichever Console is current
class ConsoleHandle:
    def __init__(self) -> None:
        self.current = make_console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self.current, name)


console = ConsoleHandle()


# the real Console (Rich Live needs one, not the handle)
def get_console() -> Console:
    return console.current


# * Replace the current Console; no options restores the default
def use_console(**options: Any) -> Console:
    console.current = make_console(**options)
    return console.current


__all__ = ["THEME", "console", "get_console", "make_console", "use_console"]
