from __future__ import annotations

"""
Refresh Ticker.

Periodic trigger for the live viewport. Deadlines sit on a fixed grid
anchored at construction time (start + n * interval) so the cadence does
not drift with the rate at which entries are processed; ticks missed while
the walker was busy collapse into a single one.
"""

import time
from typing import Callable, Optional

Clock = Callable[[], float]


class RefreshTicker:
    """
    Polled periodic trigger driven by a monotonic clock.

    Attributes:
        interval: Seconds between ticks, 0 when disabled.
    """

    def __init__(self, interval_ms: int, clock: Optional[Clock] = None):
        """
        Args:
            interval_ms: Milliseconds between ticks; 0 disables the ticker.
            clock: Monotonic time source in seconds. Defaults to time.monotonic.
        """
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be >= 0, got {interval_ms}")
        self._clock: Clock = clock or time.monotonic
        self.interval = interval_ms / 1000.0
        self._deadline = self._clock() + self.interval
        self.ticks = 0

    @property
    def enabled(self) -> bool:
        return self.interval > 0

    def due(self) -> bool:
        """
        Report whether a deadline has passed since the last tick.

        Advances the deadline to the first grid point after now when it
        fires.

        Returns:
            bool: True at most once per elapsed grid slot. Always False when
                  the ticker is disabled.
        """
        if not self.enabled:
            return False

        now = self._clock()
        if now < self._deadline:
            return False

        missed = int((now - self._deadline) // self.interval)
        self._deadline += (missed + 1) * self.interval
        self.ticks += 1
        return True
