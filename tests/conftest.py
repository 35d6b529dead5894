# tests/conftest.py
# Pytest configuration w/ isolation fixtures & deterministic clock/scheduler doubles

import json
from pathlib import Path
from typing import Callable

import pytest

from shiftclock.core.clock import SystemClock
from shiftclock.core.session import ShiftSession
from shiftclock.store.kv_store import MemoryStore

T0 = 1_700_000_000.0


# * Clock advanced by hand instead of sleeping
class ManualClock:
    def __init__(self, start: float = T0) -> None:
        self.t = start

    def now(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


class _PendingCall:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


# * Scheduler that queues calls until the test fires them
class ManualScheduler:
    def __init__(self) -> None:
        self.calls: list[_PendingCall] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> _PendingCall:
        call = _PendingCall(delay, callback)
        self.calls.append(call)
        return call

    @property
    def pending(self) -> list[_PendingCall]:
        return [c for c in self.calls if not c.cancelled]

    # run the oldest pending call; returns False when nothing is queued
    def fire_next(self) -> bool:
        pending = self.pending
        if not pending:
            return False
        call = pending[0]
        self.calls.remove(call)
        call.callback()
        return True


@pytest.fixture(autouse=True)
def isolate_config(tmp_path_factory, monkeypatch):
    # isolation dirs live outside the test's own tmp_path
    iso_root = tmp_path_factory.mktemp("iso")

    # Patch Path.home() to isolated temp directory
    fake_home = iso_root / "fake_home"
    fake_home.mkdir()

    config_dir = fake_home / ".shiftclock"
    config_dir.mkdir()

    # export files land in the per-test working directory
    workdir = iso_root / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    config_data = {
        "data_dir": "~/.shiftclock/data",
        "export_filename": "shifts.csv",
        "refresh_interval": 0.25,
        "confirm_clear": True,
        "history_limit": 0,
        "dev_mode": False,
    }
    config_file = config_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("SHIFTCLOCK_CONFIG", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from shiftclock.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! drop any event sink a previous CLI run installed
    from shiftclock.core.output import reset_sink

    reset_sink()
    yield fake_home
    reset_sink()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session(store, clock):
    with ShiftSession(store, clock=clock) as s:
        yield s


@pytest.fixture
def frozen_clock(monkeypatch):
    # route every SystemClock (used by CLI commands) through one manual clock
    manual = ManualClock()
    monkeypatch.setattr(SystemClock, "now", lambda self: manual.now())
    return manual


@pytest.fixture
def data_dir(isolate_config):
    # default data location under the isolated home
    return isolate_config / ".shiftclock" / "data"
