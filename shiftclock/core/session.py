# shiftclock/core/session.py
# Explicit context object owning one shift timer, the wage, history, clock & display refresh
#
# * Callers build a ShiftSession over a KeyValueStore instead of relying on module-level state
# * Every transition persists the timer snapshot so a shift survives process restarts
# * Transitions & refresh ticks run under one lock; a tick that lost the race to a pause/end/reset draws nothing

from __future__ import annotations

from threading import RLock
from typing import Callable

from .clock import Clock, SystemClock
from .constants import DEFAULT_REFRESH_INTERVAL
from .events import config_value, refresh_started, refresh_stopped, refresh_tick
from .exceptions import WageNotSetError
from .formatting import earned_for, round_seconds
from .refresh import RefreshTask, Scheduler
from .timer import ShiftTimer
from .types import DisplaySnapshot, ShiftRecord
from .wage import can_start_with, parse_wage
from ..store.entries import TimerStateStore, WageStore
from ..store.history import ShiftHistoryStore
from ..store.kv_store import KeyValueStore

DisplaySink = Callable[[DisplaySnapshot], None]


class ShiftSession:
    def __init__(
        self,
        store: KeyValueStore,
        *,
        clock: Clock | None = None,
        display: DisplaySink | None = None,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.clock = clock or SystemClock()
        self.history = ShiftHistoryStore(store)
        self._wages = WageStore(store)
        self._timer_state = TimerStateStore(store)

        self._wage = self._wages.load()
        self.timer = ShiftTimer(self.clock, self._timer_state.load())

        self._display = display
        self._refresh_interval = refresh_interval
        self._scheduler = scheduler
        self._refresh: RefreshTask | None = None
        # highest elapsed value shown during the current running shift
        self._shown_elapsed = 0.0
        # reentrant: transitions emit, & emitting builds a display snapshot
        self._lock = RLock()

        if self._display is not None and self.timer.is_running:
            self._start_refresh()

    # ===== WAGE =====

    @property
    def wage(self) -> float:
        return self._wage

    # * Validate & persist a new wage; invalid input raises InvalidWageError w/o changing state
    def save_wage(self, raw: object) -> float:
        value = parse_wage(raw)
        with self._lock:
            self._wages.save(value)
            self._wage = value
            config_value("hourly_wage", value)
            self._emit()
        return value

    # ===== TIMER ACTIONS =====

    # * Idle -> Running; requires a positive wage
    def start(self) -> bool:
        with self._lock:
            if not self.timer.is_idle:
                return False
            if not can_start_with(self._wage):
                raise WageNotSetError("Set your hourly wage first.")
            self.timer.start()
            self._shown_elapsed = self.timer.accumulated
            self._persist_timer()
            self._start_refresh()
            self._emit()
            return True

    def pause(self) -> bool:
        with self._lock:
            if not self.timer.pause():
                return False
            self._persist_timer()
            self._stop_refresh()
            self._emit()
            return True

    def resume(self) -> bool:
        with self._lock:
            if not self.timer.resume():
                return False
            self._persist_timer()
            self._start_refresh()
            self._emit()
            return True

    # * Finish the shift & append its record to history; None when no shift is in progress
    def end(self) -> ShiftRecord | None:
        with self._lock:
            if self.timer.is_idle:
                return None
            # history is written first; if that raises, the shift is still in progress
            record = ShiftRecord.create(
                ended_at=self.clock.now(),
                duration_seconds=round_seconds(self.timer.elapsed()),
                wage=self._wage,
            )
            self.history.append(record)
            self.timer.end()
            self._persist_timer()
            self._stop_refresh()
            self._shown_elapsed = 0.0
            self._emit()
            return record

    # * Discard banked time w/o recording a shift
    def reset(self) -> bool:
        with self._lock:
            if not self.timer.reset():
                return False
            self._persist_timer()
            self._stop_refresh()
            self._shown_elapsed = 0.0
            self._emit()
            return True

    # ===== DISPLAY =====

    # * Live display values; elapsed never goes backwards while running
    def display(self) -> DisplaySnapshot:
        with self._lock:
            elapsed = self.timer.elapsed()
            if self.timer.is_running:
                elapsed = max(elapsed, self._shown_elapsed)
            self._shown_elapsed = elapsed
            return DisplaySnapshot(
                state=self.timer.state,
                elapsed_seconds=elapsed,
                earned=earned_for(elapsed, self._wage),
                wage=self._wage,
            )

    @property
    def refreshing(self) -> bool:
        return self._refresh is not None and self._refresh.active

    # * Attach a display sink; starts refreshing immediately if a shift is running
    def attach_display(self, display: DisplaySink) -> None:
        with self._lock:
            self._stop_refresh()
            self._display = display
            if self.timer.is_running:
                self._start_refresh()
            self._emit()

    def detach_display(self) -> None:
        with self._lock:
            self._stop_refresh()
            self._display = None

    def close(self) -> None:
        with self._lock:
            self._stop_refresh()

    def __enter__(self) -> "ShiftSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ===== INTERNALS =====

    def _emit(self) -> None:
        if self._display is not None:
            self._display(self.display())

    # runs on the scheduler thread
    def _tick(self) -> None:
        with self._lock:
            if not self.refreshing or self._display is None:
                return
            snapshot = self.display()
            refresh_tick(snapshot.elapsed_seconds)
            self._display(snapshot)

    # idle w/ nothing banked is the absent entry
    def _persist_timer(self) -> None:
        if self.timer.is_idle and self.timer.accumulated == 0:
            self._timer_state.clear()
        else:
            self._timer_state.save(self.timer.snapshot())

    def _start_refresh(self) -> None:
        if self._display is None or self.refreshing:
            return
        self._refresh = RefreshTask(
            self._refresh_interval, self._tick, scheduler=self._scheduler
        ).start()
        refresh_started(self._refresh_interval)

    def _stop_refresh(self) -> None:
        if self._refresh is not None:
            self._refresh.cancel()
            self._refresh = None
            refresh_stopped()
