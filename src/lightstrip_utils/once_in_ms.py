"""
Timing utility for pacing the frame loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    The effect runner polls this every loop iteration and only advances a
    frame when the interval has passed.

    Example:
        frame_timer = OnceInMs(50)  # 20 FPS

        while running:
            if frame_timer.should_execute():
                runner.step()
    """

    def __init__(self, interval_ms: float, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Seconds source, replaceable for tests
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self.last_execution = None

    def should_execute(self) -> bool:
        """True (and the timer restarts) if the interval has passed; always True on first call"""
        current = self._clock()
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None

    def elapsed_ms(self) -> float:
        if self.last_execution is None:
            return float("inf")
        return (self._clock() - self.last_execution) * 1000

    def remaining_ms(self) -> float:
        """Milliseconds until the next execution is due (negative if overdue)"""
        return self.interval_ms - self.elapsed_ms()
