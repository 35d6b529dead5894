# shiftclock/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (SHIFTCLOCK_CONFIG may come from .env)
load_dotenv()

from ..config.settings import settings_manager
from ..ui.console import console
from .decorators import handle_shiftclock_error


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Track paid work shifts: start, pause, resume & end a timer, then review or export earnings.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings & initialize verbose output before any subcommand runs
@app.callback(invoke_without_command=True)
@handle_shiftclock_error
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..core.events import close_output, config_value, enable_output

    # log_file implies verbose mode
    enable_output(
        verbose=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=getattr(ctx.obj, "dev_mode", False),
    )
    ctx.call_on_close(close_output)
    config_value("config_path", settings_manager.config_path)
    config_value("data_dir", ctx.obj.data_path)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# register commands (imports trigger @app.command decorators)
from .commands import shift, wage, history, config, live  # noqa: E402,F401
