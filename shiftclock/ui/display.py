# shiftclock/ui/display.py
# Rich renderables for timer status, live view & shift history

from __future__ import annotations

from typing import Sequence

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.formatting import format_hms, format_money, format_rate, local_time
from ..core.types import DisplaySnapshot, ShiftRecord, TimerState

STATE_LABELS = {
    TimerState.IDLE: "Idle",
    TimerState.RUNNING: "Running",
    TimerState.PAUSED: "Paused",
}

# key bindings shown under the live panel
KEY_HELP = "[s] start  [p] pause  [r] resume  [e] end  [x] reset  [q] quit"


def state_label(state: TimerState) -> str:
    return f"[state.{state.value}]{STATE_LABELS[state]}[/]"


# * Checkmark + message line used after successful actions
def success_line(label: str, detail: str = "") -> str:
    suffix = f" [shiftclock.accent2]{detail}[/]" if detail else ""
    return f"[success]✓[/] {label}{suffix}"


# * Dimmed notice for no-op actions
def notice_line(message: str) -> str:
    return f"[dim]{message}[/]"


# * Status grid: state, elapsed, earned & wage
def render_status(snapshot: DisplaySnapshot) -> Table:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="dim", justify="right")
    grid.add_column()
    grid.add_row("State", state_label(snapshot.state))
    grid.add_row("Elapsed", f"[shiftclock.accent]{snapshot.formatted_elapsed}[/]")
    grid.add_row("Earned", f"[shiftclock.money]{format_money(snapshot.earned)}[/]")
    grid.add_row("Wage", format_rate(snapshot.wage) if snapshot.wage > 0 else "[warning]not set[/]")
    return grid


# * Full live view: status panel, optional message & key help
def render_live(snapshot: DisplaySnapshot, message: str | None = None) -> RenderableType:
    parts: list[RenderableType] = [
        Panel(render_status(snapshot), title="[bold]Shift Timer[/]", expand=False)
    ]
    if message:
        parts.append(Text.from_markup(message))
    parts.append(Text(KEY_HELP, style="dim"))
    return Group(*parts)


# * History table, most recent first; limit 0 shows everything
def history_table(records: Sequence[ShiftRecord], limit: int = 0) -> Table:
    shown = records[:limit] if limit else records
    table = Table(title="Shift History", title_style="shiftclock.accent", header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Duration", justify="right")
    table.add_column("Earned", justify="right", style="shiftclock.money")
    table.add_column("Wage", justify="right")
    table.add_column("Completed")
    for i, record in enumerate(shown, start=1):
        table.add_row(
            str(i),
            format_hms(record.duration_seconds),
            format_money(record.amount),
            format_rate(record.wage_at_end),
            local_time(record.timestamp),
        )
    if limit and len(records) > limit:
        table.caption = f"Showing {limit} of {len(records)} shifts"
    return table
