# shiftclock/core/timer.py
# Shift timer state machine: idle -> running <-> paused -> idle w/ accumulated duration across segments

from __future__ import annotations

from .clock import Clock
from .formatting import earned_for, round_seconds
from .types import TimerSnapshot, TimerState
from .events import timer_transition


# * Pausable shift timer driven by an injected clock
# * Out-of-order transitions are silent no-ops: each action returns False & leaves state untouched
class ShiftTimer:
    def __init__(self, clock: Clock, snapshot: TimerSnapshot | None = None) -> None:
        self._clock = clock
        snapshot = snapshot or TimerSnapshot()
        self._state = snapshot.state
        self._accumulated = snapshot.accumulated
        self._segment_start = snapshot.segment_start

    @property
    def state(self) -> TimerState:
        return self._state

    # banked time from completed segments (seconds)
    @property
    def accumulated(self) -> float:
        return self._accumulated

    @property
    def segment_start(self) -> float | None:
        return self._segment_start

    @property
    def is_idle(self) -> bool:
        return self._state is TimerState.IDLE

    @property
    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self._state is TimerState.PAUSED

    # reset only discards time that is not actively counting
    @property
    def can_reset(self) -> bool:
        if self.is_paused:
            return True
        return self.is_idle and self._accumulated > 0

    # * Total elapsed seconds: banked time plus the open segment while running
    def elapsed(self) -> float:
        open_segment = 0.0
        if self._state is TimerState.RUNNING and self._segment_start is not None:
            open_segment = self._clock.now() - self._segment_start
        return max(0.0, open_segment + self._accumulated)

    def earned(self, wage: float) -> float:
        return earned_for(self.elapsed(), wage)

    # * Idle -> Running; wage gating is the caller's concern
    def start(self) -> bool:
        if not self.is_idle:
            return False
        self._segment_start = self._clock.now()
        self._state = TimerState.RUNNING
        timer_transition("start", TimerState.IDLE, self._state, self._accumulated)
        return True

    # * Running -> Paused; bank the open segment
    def pause(self) -> bool:
        if not self.is_running or self._segment_start is None:
            return False
        self._accumulated += self._clock.now() - self._segment_start
        self._segment_start = None
        self._state = TimerState.PAUSED
        timer_transition("pause", TimerState.RUNNING, self._state, self._accumulated)
        return True

    # * Paused -> Running; open a new segment
    def resume(self) -> bool:
        if not self.is_paused:
            return False
        self._segment_start = self._clock.now()
        self._state = TimerState.RUNNING
        timer_transition("resume", TimerState.PAUSED, self._state, self._accumulated)
        return True

    # * Running|Paused -> Idle; returns the finalized duration in whole seconds, or None if idle
    def end(self) -> int | None:
        if self.is_idle:
            return None
        before = self._state
        total = self.elapsed()
        self._clear()
        timer_transition("end", before, self._state, total)
        return round_seconds(total)

    # * Paused|Idle w/ leftover time -> Idle; discards accumulated time w/o a history entry
    def reset(self) -> bool:
        if not self.can_reset:
            return False
        before = self._state
        discarded = self._accumulated
        self._clear()
        timer_transition("reset", before, self._state, discarded)
        return True

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            state=self._state,
            accumulated=self._accumulated,
            segment_start=self._segment_start,
        )

    def _clear(self) -> None:
        self._state = TimerState.IDLE
        self._accumulated = 0.0
        self._segment_start = None
