# shiftclock/cli/commands/wage.py
# Show or save the hourly wage

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.formatting import format_rate
from ...ui.console import console
from ..app import app
from ..decorators import handle_shiftclock_error
from ..helpers import build_session, print_success


@app.command()
@handle_shiftclock_error
def wage(
    ctx: typer.Context,
    value: Optional[str] = typer.Argument(
        None, help="New hourly wage (omit to show the current one)"
    ),
) -> None:
    """Show or set the hourly wage used to compute earnings."""
    session = build_session(get_settings(ctx))
    if value is None:
        if session.wage > 0:
            console.print(f"[shiftclock.accent2]{format_rate(session.wage)}[/]")
        else:
            console.print("[warning]Hourly wage not set[/]")
        return

    saved = session.save_wage(value)
    print_success("Hourly wage set to", format_rate(saved))
