# linelag/collector/clock.py - Timestamp source
"""
Clock used to timestamp incoming lines.
"""

import time
from datetime import datetime, timezone


class Clock:
    """
    Monotonic timestamp source.

    `now_ns` drives all latency arithmetic and never goes backwards.
    `wall` is only used to show absolute arrival times.
    """

    def now_ns(self) -> int:
        """Monotonic reading in nanoseconds"""
        return time.monotonic_ns()

    def wall(self) -> datetime:
        """Current wall-clock time in UTC"""
        return datetime.now(timezone.utc)
