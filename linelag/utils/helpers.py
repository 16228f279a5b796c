# linelag/utils/helpers.py - Helper functions
"""
Duration and unit helpers.

All durations are integer nanoseconds.
"""

import re
from typing import Dict

from linelag.utils.errors import ConfigurationError, LatencyOverflowError


NANOS_PER_UNIT: Dict[str, int] = {
    'ns': 1,
    'us': 1_000,
    'ms': 1_000_000,
    's': 1_000_000_000,
    'm': 60 * 1_000_000_000,
    'h': 60 * 60 * 1_000_000_000,
    'd': 24 * 60 * 60 * 1_000_000_000,
}

LATENCY_UNITS = tuple(NANOS_PER_UNIT)

# Largest duration representable as signed 64-bit nanoseconds
MAX_DURATION_NS = 2 ** 63 - 1

_DURATION_PART = re.compile(r'(\d+)\s*(ns|us|µs|ms|s|m|h|d)')
_DURATION_FULL = re.compile(r'^(?:\d+\s*(?:ns|us|µs|ms|s|m|h|d)\s*)+$')


def validate_unit(unit: str) -> str:
    """
    Check that a latency unit is one of the supported symbols.

    Args:
        unit: Unit symbol (e.g., 'ms')

    Returns:
        The unit, unchanged

    Raises:
        ConfigurationError: If the unit is not recognized
    """
    if unit not in NANOS_PER_UNIT:
        raise ConfigurationError(
            f"Unknown unit {unit!r}; valid units are {', '.join(LATENCY_UNITS)}"
        )
    return unit


def check_duration(duration_ns: int) -> int:
    """
    Ensure a duration is non-negative and fits in 64-bit nanoseconds.

    Raises:
        LatencyOverflowError: If the duration is out of range
    """
    if duration_ns < 0 or duration_ns > MAX_DURATION_NS:
        raise LatencyOverflowError(
            f"Duration of {duration_ns}ns is outside the supported range "
            f"(0 to {MAX_DURATION_NS}ns)"
        )
    return duration_ns


def duration_as_unit(duration_ns: int, unit: str) -> int:
    """
    Convert a duration to a whole count of the given unit.

    The conversion truncates: 1500ms in seconds is 1.

    Args:
        duration_ns: Duration in nanoseconds
        unit: One of ns, us, ms, s, m, h, d

    Returns:
        Number of whole units in the duration

    Raises:
        ConfigurationError: If the unit is not recognized
        LatencyOverflowError: If the duration is out of range
    """
    validate_unit(unit)
    check_duration(duration_ns)
    return duration_ns // NANOS_PER_UNIT[unit]


def parse_duration(text: str) -> int:
    """
    Parse a duration string into nanoseconds.

    Accepts one or more ``<integer><unit>`` parts, e.g. "1ms", "250us",
    "1m30s". "µs" is accepted as an alias for "us".

    Args:
        text: Duration string

    Returns:
        Duration in nanoseconds

    Raises:
        ConfigurationError: If the string is malformed or out of range
    """
    value = text.strip() if isinstance(text, str) else ''
    if not value or not _DURATION_FULL.match(value):
        raise ConfigurationError(
            f"Invalid duration {text!r}; expected e.g. 1ms, 250us, 2s, 1m30s"
        )

    total = 0
    for amount, unit in _DURATION_PART.findall(value):
        if unit == 'µs':
            unit = 'us'
        total += int(amount) * NANOS_PER_UNIT[unit]

    if total > MAX_DURATION_NS:
        raise ConfigurationError(f"Duration {text!r} overflows the nanosecond range")

    return total


def format_duration(duration_ns: int) -> str:
    """
    Format duration in nanoseconds to human-readable string.

    Args:
        duration_ns: Duration in nanoseconds

    Returns:
        Formatted string (e.g., "1.5ms")
    """
    if duration_ns < 1000:
        return f"{duration_ns}ns"
    elif duration_ns < 1_000_000:
        return f"{duration_ns/1000:.1f}us"
    elif duration_ns < 1_000_000_000:
        return f"{duration_ns/1_000_000:.1f}ms"
    else:
        return f"{duration_ns/1_000_000_000:.1f}s"
