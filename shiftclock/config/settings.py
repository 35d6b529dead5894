# shiftclock/config/settings.py
# Configuration management for shiftclock CLI including data location, export name & refresh cadence

import os
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Dict, Any, Optional, cast

import typer

from ..core.constants import (
    DEFAULT_EXPORT_FILENAME,
    DEFAULT_REFRESH_INTERVAL,
    MIN_REFRESH_INTERVAL,
)
from ..core.exceptions import JSONParsingError, SettingsValidationError, FileReadError
from ..store.generics import read_json_safe, write_json_safe

CONFIG_ENV_VAR = "SHIFTCLOCK_CONFIG"


# * Default settings dataclass for shiftclock CLI
@dataclass
class ShiftClockSettings:
    # where the wage, history & timer entries live; a leading ~ is the home directory
    data_dir: str = "~/.shiftclock/data"

    # default export file name
    export_filename: str = DEFAULT_EXPORT_FILENAME

    # live view refresh cadence in seconds
    refresh_interval: float = DEFAULT_REFRESH_INTERVAL

    # ask before clearing history
    confirm_clear: bool = True

    # rows shown by `history list` (0 = all)
    history_limit: int = 0

    # dev mode setting (enables debug output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if not isinstance(self.data_dir, str) or not self.data_dir.strip():
            raise ValueError(f"data_dir must be a non-empty string, got {self.data_dir!r}")

        if not isinstance(self.export_filename, str) or not self.export_filename.strip():
            raise ValueError(
                f"export_filename must be a non-empty string, got {self.export_filename!r}"
            )

        # refresh_interval validation (bool is an int subclass, reject it explicitly)
        if (
            isinstance(self.refresh_interval, bool)
            or not isinstance(self.refresh_interval, (int, float))
            or self.refresh_interval < MIN_REFRESH_INTERVAL
        ):
            raise ValueError(
                f"refresh_interval must be >= {MIN_REFRESH_INTERVAL} seconds, "
                f"got {self.refresh_interval}"
            )

        # confirm_clear strict bool validation (no coercion)
        if not isinstance(self.confirm_clear, bool):
            raise ValueError(
                f"confirm_clear must be a boolean (true/false), "
                f"got {type(self.confirm_clear).__name__}"
            )

        # history_limit validation (non-negative integer)
        if (
            isinstance(self.history_limit, bool)
            or not isinstance(self.history_limit, int)
            or self.history_limit < 0
        ):
            raise ValueError(
                f"history_limit must be a non-negative integer, got {self.history_limit}"
            )

        # dev_mode strict bool validation (no coercion)
        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

    @property
    def data_path(self) -> Path:
        path = Path(self.data_dir)
        if path.parts and path.parts[0] == "~":
            return Path.home().joinpath(*path.parts[1:])
        return path

    @property
    def export_path(self) -> Path:
        return Path(self.export_filename)


# * Default config location, overridable via SHIFTCLOCK_CONFIG
def default_config_path() -> Path:
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return Path.home() / ".shiftclock" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[ShiftClockSettings] = None

    # load settings from file or return defaults
    def load(self) -> ShiftClockSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = ShiftClockSettings(**data)
            except (JSONParsingError, FileReadError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = ShiftClockSettings()
        else:
            self._settings = ShiftClockSettings()

        return self._settings

    # save setting to file
    def save(self, settings: ShiftClockSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; the rebuilt dataclass re-runs validation
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        try:
            updated = replace(settings, **{key: value})
        except (TypeError, ValueError) as e:
            raise SettingsValidationError(str(e), key, value)
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(ShiftClockSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[ShiftClockSettings] = None
) -> ShiftClockSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for ShiftClockSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, ShiftClockSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
