"""Millisecond interval timer."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Reports when a delay in milliseconds has passed since it was last reset."""

    def __init__(self, delay_ms: int = -1, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self.delay_ms = delay_ms
        self._start = self._clock()

    def update(self, delay_ms: int) -> None:
        """Set a new delay and restart the interval."""
        self.delay_ms = delay_ms
        self._start = self._clock()

    def destroy(self) -> None:
        """Clear the delay, so every check reports the time as over."""
        self.delay_ms = -1

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the interval started."""
        return int((self._clock() - self._start) * 1000)

    def time_over(self) -> bool:
        """Return True, and restart the interval, once the delay has passed."""
        if self.elapsed_ms() > self.delay_ms:
            self._start = self._clock()
            return True
        return False

    def report(self) -> str:
        return f"Timer:  {self.elapsed_ms()}"