# shiftclock/cli/commands/shift.py
# Timer action commands: start, pause, resume, end, reset & status

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.formatting import format_hms, format_money, format_rate
from ...ui.console import console
from ...ui.display import render_status
from ..app import app
from ..decorators import handle_shiftclock_error
from ..helpers import build_session, print_notice, print_success


# * Start a new shift (requires a positive wage)
@app.command()
@handle_shiftclock_error
def start(ctx: typer.Context) -> None:
    """Start timing a new shift."""
    session = build_session(get_settings(ctx))
    if not session.start():
        print_notice("A shift is already in progress")
        return
    print_success("Shift started", f"@ {format_rate(session.wage)}")


# * Bank the running segment
@app.command()
@handle_shiftclock_error
def pause(ctx: typer.Context) -> None:
    """Pause the running shift."""
    session = build_session(get_settings(ctx))
    if not session.pause():
        print_notice("No running shift to pause")
        return
    print_success("Paused", format_hms(session.timer.accumulated))


@app.command()
@handle_shiftclock_error
def resume(ctx: typer.Context) -> None:
    """Resume a paused shift."""
    session = build_session(get_settings(ctx))
    if not session.resume():
        print_notice("No paused shift to resume")
        return
    print_success("Resumed", format_hms(session.timer.accumulated))


# * Finish the shift & save it to history
@app.command()
@handle_shiftclock_error
def end(ctx: typer.Context) -> None:
    """End the current shift and save it to history."""
    session = build_session(get_settings(ctx))
    record = session.end()
    if record is None:
        print_notice("No shift in progress")
        return
    print_success(
        "Shift saved",
        f"{record.formatted_time} • {format_money(record.amount)} @ {format_rate(record.wage_at_end)}",
    )


# * Discard paused time w/o saving a shift
@app.command()
@handle_shiftclock_error
def reset(ctx: typer.Context) -> None:
    """Discard the paused shift without saving it."""
    session = build_session(get_settings(ctx))
    if not session.reset():
        if session.timer.is_running:
            print_notice("Pause the shift before resetting")
        else:
            print_notice("Nothing to reset")
        return
    print_success("Timer reset")


@app.command()
@handle_shiftclock_error
def status(ctx: typer.Context) -> None:
    """Show the current timer state, elapsed time and earnings."""
    session = build_session(get_settings(ctx))
    console.print(render_status(session.display()))
