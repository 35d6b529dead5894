# shiftclock/cli/commands/config.py
# Settings mgmt subcommands for shiftclock CLI (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer

from ...config.settings import settings_manager, ShiftClockSettings
from ...core.exceptions import SettingsValidationError
from ...ui.console import console
from ..app import app
from ..helpers import print_success

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(rich_markup_mode="rich", help="Manage shiftclock settings")
app.add_typer(config_app, name="config")


# concise set of known keys for validation
def _known_keys() -> set[str]:
    return {f.name for f in fields(ShiftClockSettings)}


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print("[shiftclock.accent]Current Configuration[/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()

    for key, value in data.items():
        console.print(f"  [dim]{key}:[/] [shiftclock.accent2]{json.dumps(value)}[/]")

    console.print()
    console.print(
        "[dim]Use [/][shiftclock.accent2]shiftclock config --help[/][dim] to see available commands[/]"
    )


# * default callback: show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    """Print one setting as JSON."""
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    console.print(f"[shiftclock.accent2]{json.dumps(value)}[/]")


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    """Change one setting."""
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except SettingsValidationError as e:
        raise typer.BadParameter(str(e))
    print_success(f"Set {key}", json.dumps(coerced))


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    """Restore default settings."""
    settings_manager.reset()
    print_success("Reset settings to defaults")


# * Show the configuration file path
@config_app.command()
def path() -> None:
    """Show the settings file location."""
    console.print(f"[shiftclock.accent2]{settings_manager.config_path}[/]", soft_wrap=True)


# * Explicit 'list' command to show current settings
@config_app.command(name="list")
def list_cmd() -> None:
    """Show all settings."""
    _print_current_settings()
