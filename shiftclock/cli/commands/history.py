# shiftclock/cli/commands/history.py
# History subcommands (list/export/clear) over the persisted shift log

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...ui.console import console
from ...ui.display import history_table
from ..app import app
from ..decorators import handle_shiftclock_error
from ..helpers import build_session, print_notice, print_success

# * Sub-app for history commands; registered on root app
history_app = typer.Typer(rich_markup_mode="rich", help="View, export or clear saved shifts")
app.add_typer(history_app, name="history")


def _print_history(ctx: typer.Context, limit: Optional[int] = None) -> None:
    settings = get_settings(ctx)
    records = build_session(settings).history.list()
    if not records:
        print_notice("No shifts recorded yet")
        return
    console.print(history_table(records, settings.history_limit if limit is None else limit))


# * default callback: list history when no subcommand provided
@history_app.callback(invoke_without_command=True)
@handle_shiftclock_error
def history_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_history(ctx)


@history_app.command(name="list")
@handle_shiftclock_error
def list_cmd(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=0, help="Show at most N shifts (0 = all)"
    ),
) -> None:
    """List saved shifts, most recent first."""
    _print_history(ctx, limit)


# * Write history to a CSV file
@history_app.command()
@handle_shiftclock_error
def export(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(
        None, "--out", "-o", help="Output file (defaults to the configured export_filename)"
    ),
) -> None:
    """Export saved shifts as CSV."""
    settings = get_settings(ctx)
    session = build_session(settings)
    count = len(session.history)
    path = session.history.export_to(out or settings.export_path)
    print_success(f"Exported {count} shift{'' if count == 1 else 's'} to", str(path))


# * Clear all saved shifts after confirmation
@history_app.command()
@handle_shiftclock_error
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Delete every saved shift."""
    settings = get_settings(ctx)
    if settings.confirm_clear and not yes:
        if not typer.confirm("Clear all saved shifts?", default=False):
            print_notice("History unchanged")
            return
    count = build_session(settings).history.clear()
    if count == 0:
        print_notice("History is already empty")
    else:
        print_success(f"Cleared {count} shift{'' if count == 1 else 's'}")
