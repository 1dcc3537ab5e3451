"""A pausable wall-clock timer for driving simulations."""

from __future__ import annotations

import time
from collections.abc import Callable


class RealTimeSimulator:
    """Tracks elapsed real time with start, pause and resume."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._start_time = 0.0
        self._paused_elapsed = 0.0
        self._running = False

    def start(self) -> None:
        """Restart the timer from zero."""
        self._start_time = self._clock()
        self._paused_elapsed = 0.0
        self._running = True

    def pause(self) -> None:
        """Freeze the elapsed time; no effect when already paused."""
        if self._running:
            self._paused_elapsed = self.elapsed()
            self._running = False

    def resume(self) -> None:
        """Continue counting from the frozen elapsed time."""
        if not self._running:
            self._start_time = self._clock() - self._paused_elapsed
            self._running = True

    def elapsed(self) -> float:
        """Seconds counted so far."""
        if self._running:
            return self._clock() - self._start_time
        return self._paused_elapsed

    @property
    def start_time(self) -> float:
        """Clock reading the current run is measured from."""
        return self._start_time

    @property
    def running(self) -> bool:
        """Whether the timer is counting."""
        return self._running