# shiftclock/cli/decorators.py
# CLI decorator mapping shiftclock errors to Rich-formatted messages & exit codes

import functools
from typing import Callable, TypeVar, Any, cast

from ..core.exceptions import (
    ShiftClockError,
    ValidationError,
    WageNotSetError,
    EmptyHistoryError,
    ConfigurationError,
    JSONParsingError,
    FileOperationError,
    StorageError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# most specific first; first isinstance match wins
_ERROR_LABELS: list[tuple[type[ShiftClockError], str]] = [
    (ValidationError, "Invalid Input"),
    (WageNotSetError, "Wage Not Set"),
    (EmptyHistoryError, "Nothing To Export"),
    (ConfigurationError, "Configuration Error"),
    (JSONParsingError, "JSON Parsing Error"),
    (FileOperationError, "File Error"),
    (StorageError, "Storage Error"),
]


def error_label(error: ShiftClockError) -> str:
    for kind, label in _ERROR_LABELS:
        if isinstance(error, kind):
            return label
    return "Error"


# * Decorator for handling shiftclock errors in CLI commands w/ Rich output
def handle_shiftclock_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..ui.console import console

        try:
            return func(*args, **kwargs)
        except ShiftClockError as e:
            console.print(format_error_message(error_label(e), str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
