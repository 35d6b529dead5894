# tests/integration/test_cli_shift.py
# Integration tests for wage & timer commands across separate CLI invocations

import json

from typer.testing import CliRunner

from shiftclock.cli.app import app

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


def invoke(runner, *args, **kwargs):
    return runner.invoke(app, list(args), env=ENV, **kwargs)


# * Test wage show & set
class TestWageCommand:

    # * Test unset wage is reported
    def test_show_unset(self):
        result = invoke(CliRunner(), "wage")

        assert result.exit_code == 0
        assert "Hourly wage not set" in result.stdout

    # * Test setting then showing the wage
    def test_set_and_show(self, data_dir):
        runner = CliRunner()

        result = invoke(runner, "wage", "22.5")
        assert result.exit_code == 0
        assert "Hourly wage set to" in result.stdout
        assert "$22.50/hr" in result.stdout

        result = invoke(runner, "wage")
        assert "$22.50/hr" in result.stdout
        assert (data_dir / "hourly_wage").read_text() == "22.5"

    # * Test invalid wage exits 1 & keeps the old value
    def test_invalid_wage(self):
        runner = CliRunner()
        invoke(runner, "wage", "15")

        result = invoke(runner, "wage", "abc")

        assert result.exit_code == 1
        assert "Invalid Input:" in result.stdout
        assert "Please enter a valid hourly wage." in result.stdout
        assert "$15.00/hr" in invoke(runner, "wage").stdout

    # * Test small negative wage is accepted after the option terminator
    def test_small_negative(self):
        result = invoke(CliRunner(), "wage", "--", "-0.05")

        assert result.exit_code == 0
        assert "$-0.05/hr" in result.stdout


# * Test timer commands persist state between invocations
class TestShiftCommands:

    # * Test start w/o wage exits 1 & leaves the timer idle
    def test_start_without_wage(self):
        runner = CliRunner()

        result = invoke(runner, "start")

        assert result.exit_code == 1
        assert "Wage Not Set:" in result.stdout
        assert "Set your hourly wage first." in result.stdout
        assert "Idle" in invoke(runner, "status").stdout

    # * Test a full start/pause/resume/end cycle w/ a controlled clock
    def test_full_cycle(self, frozen_clock, data_dir):
        runner = CliRunner()
        invoke(runner, "wage", "20")

        result = invoke(runner, "start")
        assert result.exit_code == 0
        assert "Shift started" in result.stdout
        assert "$20.00/hr" in result.stdout

        frozen_clock.advance(1800)
        result = invoke(runner, "pause")
        assert "Paused" in result.stdout
        assert "00:30:00" in result.stdout

        frozen_clock.advance(1000)
        assert "Resumed" in invoke(runner, "resume").stdout

        frozen_clock.advance(1800)
        result = invoke(runner, "end")
        assert result.exit_code == 0
        assert "Shift saved" in result.stdout
        assert "01:00:00" in result.stdout
        assert "$20.00" in result.stdout

        saved = json.loads((data_dir / "history").read_text())
        assert saved == [
            {"ts": "2023-11-14T23:30:00.000Z", "seconds": 3600, "amount": 20.0, "wage": 20.0}
        ]

    # * Test status shows a running shift's elapsed time & earnings
    def test_status_running(self, frozen_clock):
        runner = CliRunner()
        invoke(runner, "wage", "36")
        invoke(runner, "start")
        frozen_clock.advance(100)

        result = invoke(runner, "status")

        assert result.exit_code == 0
        assert "Running" in result.stdout
        assert "00:01:40" in result.stdout
        assert "$1.00" in result.stdout

    # * Test out-of-order commands print notices & succeed
    def test_noop_notices(self, frozen_clock):
        runner = CliRunner()

        assert "No running shift to pause" in invoke(runner, "pause").stdout
        assert "No paused shift to resume" in invoke(runner, "resume").stdout
        assert "No shift in progress" in invoke(runner, "end").stdout
        assert "Nothing to reset" in invoke(runner, "reset").stdout

        invoke(runner, "wage", "10")
        invoke(runner, "start")
        assert "A shift is already in progress" in invoke(runner, "start").stdout
        assert "Pause the shift before resetting" in invoke(runner, "reset").stdout

    # * Test reset after pause discards the shift
    def test_reset_after_pause(self, frozen_clock):
        runner = CliRunner()
        invoke(runner, "wage", "10")
        invoke(runner, "start")
        frozen_clock.advance(60)
        invoke(runner, "pause")

        result = invoke(runner, "reset")

        assert result.exit_code == 0
        assert "Timer reset" in result.stdout
        assert "No shifts recorded yet" in invoke(runner, "history").stdout

    # * Test a shift started in one directory can be ended from another
    def test_shift_across_directories(self, frozen_clock, tmp_path, monkeypatch):
        runner = CliRunner()
        invoke(runner, "wage", "20")
        invoke(runner, "start")
        frozen_clock.advance(600)

        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        result = invoke(runner, "end")

        assert result.exit_code == 0
        assert "Shift saved" in result.stdout
        assert "00:10:00" in result.stdout

    # * Test live view refuses to run w/o a terminal
    def test_live_requires_terminal(self):
        result = invoke(CliRunner(), "live")

        assert result.exit_code == 1
        assert "interactive terminal" in result.stdout


# * Test root callback behavior
class TestRoot:

    # * Test bare invocation prints help
    def test_no_args_prints_help(self):
        result = invoke(CliRunner())

        assert result.exit_code == 0
        assert "start" in result.stdout
        assert "history" in result.stdout

    # * Test --log-file enables verbose logging to the file
    def test_log_file(self, tmp_path):
        log_file = tmp_path / "verbose.log"

        result = invoke(CliRunner(), "--log-file", str(log_file), "wage", "12")

        assert result.exit_code == 0
        text = log_file.read_text(encoding="utf-8")
        assert "CONFIG" in text
        assert "hourly_wage = 12.0" in text

    # * Test --verbose prints config & store events to the console
    def test_verbose_events(self):
        result = invoke(CliRunner(), "--verbose", "wage", "12")

        assert result.exit_code == 0
        assert "[CONFIG] hourly_wage = 12.0" in result.stdout
        assert "[STORE] wrote" in result.stdout

    # * Test an unusable log file path fails cleanly
    def test_log_file_unusable(self, tmp_path):
        taken = tmp_path / "taken"
        taken.mkdir()

        result = invoke(CliRunner(), "--log-file", str(taken), "status")

        assert result.exit_code == 1
        assert "File Error:" in result.stdout
