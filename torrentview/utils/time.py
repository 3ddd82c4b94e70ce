"""Time/clock abstraction to aid testability."""

from __future__ import annotations

import time as _time


class Clock:
    """Clock abstraction to aid testability."""

    def now(self) -> float:
        """Return current wall-clock time in seconds."""
        return _time.time()

    def now_secs(self) -> int:
        """Return current wall-clock time in whole seconds since the epoch."""
        return int(self.now())


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, timestamp: float):
        """Initialize fixed clock.

        Args:
            timestamp: Seconds since the epoch returned by every call

        """
        self.timestamp = timestamp

    def now(self) -> float:
        """Return the frozen timestamp."""
        return self.timestamp
