# tests/conftest.py - Shared fixtures
"""
Shared fixtures for linelag tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from linelag.collector.clock import Clock


class FakeClock(Clock):
    """
    Clock that replays a fixed list of monotonic readings.

    The first reading is taken when reading starts, then one per line.
    """

    BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __init__(self, readings):
        self.readings = list(readings)
        self.last_ns = 0

    def now_ns(self) -> int:
        self.last_ns = self.readings.pop(0)
        return self.last_ns

    def wall(self) -> datetime:
        return self.BASE + timedelta(microseconds=self.last_ns // 1000)


@pytest.fixture
def fake_clock():
    """Factory for FakeClock instances"""
    return FakeClock
