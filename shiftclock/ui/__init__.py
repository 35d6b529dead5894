# shiftclock/ui/__init__.py
# Console & Rich renderables for timer status & history

from .console import console, get_console, use_console
from .display import (
    KEY_HELP,
    history_table,
    notice_line,
    render_live,
    render_status,
    state_label,
    success_line,
)

__all__ = [
    "console",
    "get_console",
    "use_console",
    "KEY_HELP",
    "history_table",
    "notice_line",
    "render_live",
    "render_status",
    "state_label",
    "success_line",
]
