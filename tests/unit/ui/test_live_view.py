# tests/unit/ui/test_live_view.py
# Unit tests for live view key handling against a real session w/ manual clock

import pytest
from readchar import key

from shiftclock.core.session import ShiftSession
from shiftclock.core.types import TimerState
from shiftclock.ui.live_view import LiveShiftView


@pytest.fixture
def view(store, clock, scheduler):
    session = ShiftSession(store, clock=clock, scheduler=scheduler)
    session.save_wage("20")
    return LiveShiftView(session, read_key=lambda: "q")


# * Test key dispatch to timer actions
class TestHandleKey:

    @pytest.mark.parametrize("k", ["q", "Q", key.ESC, key.CTRL_C])
    # * Test quit keys end the loop
    def test_quit(self, view, k):
        assert view.handle_key(k) is False

    # * Test unknown keys are ignored
    def test_unknown_key(self, view):
        assert view.handle_key("z") is True
        assert view.message is None
        assert view.session.timer.is_idle

    # * Test s starts & p pauses
    def test_start_pause(self, view, clock):
        assert view.handle_key("s") is True
        assert view.session.timer.is_running
        assert "Shift started" in view.message

        clock.advance(30)
        view.handle_key("p")
        assert view.session.timer.is_paused
        assert "Paused" in view.message

    # * Test uppercase keys map to the same action
    def test_uppercase(self, view):
        view.handle_key("S")

        assert view.session.timer.is_running

    # * Test e saves the shift & reports duration & earnings
    def test_end(self, view, clock):
        view.handle_key("s")
        clock.advance(3600)

        view.handle_key("e")

        assert "Shift saved" in view.message
        assert "01:00:00" in view.message
        assert "$20.00" in view.message
        assert len(view.session.history) == 1

    # * Test no-op actions report a notice
    @pytest.mark.parametrize(
        "k, notice",
        [
            ("p", "Nothing to pause"),
            ("r", "Nothing to resume"),
            ("e", "No shift in progress"),
            ("x", "Reset is only available while paused"),
        ],
    )
    def test_noops(self, view, k, notice):
        view.handle_key(k)

        assert notice in view.message
        assert view.session.timer.state is TimerState.IDLE

    # * Test start w/o wage shows an error instead of raising
    def test_start_without_wage(self, store, clock):
        view = LiveShiftView(ShiftSession(store, clock=clock), read_key=lambda: "q")

        assert view.handle_key("s") is True
        assert "Set your hourly wage first." in view.message
        assert view.session.timer.is_idle

    # * Test reset while paused
    def test_reset(self, view, clock):
        view.handle_key("s")
        clock.advance(10)
        view.handle_key("p")

        view.handle_key("x")

        assert "Timer reset" in view.message
        assert view.session.timer.is_idle
        assert len(view.session.history) == 0


# * Test the run loop w/ scripted keys & a recording console
def test_run_loop(store, clock, scheduler):
    from shiftclock.ui.console import use_console

    use_console(width=80, force_terminal=False, record=True)
    try:
        session = ShiftSession(store, clock=clock, scheduler=scheduler)
        session.save_wage("20")
        keys = iter(["s", "p", "r", "e", "q"])
        view = LiveShiftView(session, read_key=lambda: next(keys))

        view.run()

        assert len(session.history) == 1
        assert not session.refreshing
        assert scheduler.pending == []
    finally:
        use_console()
