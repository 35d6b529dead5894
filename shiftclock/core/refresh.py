# shiftclock/core/refresh.py
# Periodic display refresh modeled as a scheduled task w/ an explicit cancellation handle

from __future__ import annotations

from threading import Lock, Timer
from typing import Callable, Protocol

from .constants import MIN_REFRESH_INTERVAL


# anything returned by a scheduler that can be cancelled before it fires
class Cancellable(Protocol):
    def cancel(self) -> None: ...


# (delay seconds, callback) -> handle
Scheduler = Callable[[float, Callable[[], None]], Cancellable]


# * Default scheduler: one-shot daemon threading.Timer
def thread_scheduler(delay: float, callback: Callable[[], None]) -> Timer:
    timer = Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


# * Repeating refresh task; each tick reschedules the next until cancelled
class RefreshTask:
    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        scheduler: Scheduler | None = None,
    ) -> None:
        if interval < MIN_REFRESH_INTERVAL:
            raise ValueError(
                f"refresh interval must be >= {MIN_REFRESH_INTERVAL}s, got {interval}"
            )
        self.interval = interval
        self._callback = callback
        self._scheduler = scheduler or thread_scheduler
        self._pending: Cancellable | None = None
        self._active = False
        self._lock = Lock()

    @property
    def active(self) -> bool:
        return self._active

    # start ticking; returns self as the cancellation handle
    def start(self) -> "RefreshTask":
        with self._lock:
            if self._active:
                return self
            self._active = True
            self._pending = self._scheduler(self.interval, self._fire)
        return self

    def cancel(self) -> None:
        with self._lock:
            self._active = False
            pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()

    def _fire(self) -> None:
        with self._lock:
            if not self._active:
                return
        self._callback()
        with self._lock:
            if self._active:
                self._pending = self._scheduler(self.interval, self._fire)
