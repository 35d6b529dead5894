# shiftclock/cli/commands/live.py
# Interactive live timer view

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...ui.console import console
from ...ui.live_view import LiveShiftView
from ..app import app
from ..decorators import handle_shiftclock_error
from ..helpers import build_session


@app.command()
@handle_shiftclock_error
def live(ctx: typer.Context) -> None:
    """Open an interactive, continuously updating timer view."""
    if not console.is_terminal:
        console.print("[error]The live view needs an interactive terminal[/]")
        raise typer.Exit(1)

    with build_session(get_settings(ctx)) as session:
        LiveShiftView(session).run()
