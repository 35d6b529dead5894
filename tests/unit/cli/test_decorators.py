# tests/unit/cli/test_decorators.py
# Unit tests for CLI error decorator labels & exit behavior

import pytest

from shiftclock.cli.decorators import error_label, handle_shiftclock_error
from shiftclock.core.exceptions import (
    CorruptRecordError,
    EmptyHistoryError,
    FileWriteError,
    InvalidWageError,
    SettingsValidationError,
    ShiftClockError,
    WageNotSetError,
)


@pytest.mark.parametrize(
    "error, label",
    [
        (InvalidWageError("bad", "x"), "Invalid Input"),
        (WageNotSetError("no wage"), "Wage Not Set"),
        (EmptyHistoryError("empty"), "Nothing To Export"),
        (SettingsValidationError("bad", "k", 1), "Configuration Error"),
        (FileWriteError("cannot", "/tmp/x"), "File Error"),
        (CorruptRecordError("bad", "history"), "Storage Error"),
        (ShiftClockError("generic"), "Error"),
    ],
)
# * Test most specific label wins
def test_error_label(error, label):
    assert error_label(error) == label


# * Test decorated command prints the labeled message & exits 1
def test_handle_error_exits(capsys):
    @handle_shiftclock_error
    def command():
        raise WageNotSetError("Set your hourly wage first.")

    with pytest.raises(SystemExit) as exc:
        command()

    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Wage Not Set:" in out
    assert "Set your hourly wage first." in out


# * Test successful commands pass their return value through
def test_handle_error_passthrough():
    @handle_shiftclock_error
    def command(x):
        return x * 2

    assert command(21) == 42


# * Test non-shiftclock errors propagate untouched
def test_handle_error_other_exceptions():
    @handle_shiftclock_error
    def command():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        command()
