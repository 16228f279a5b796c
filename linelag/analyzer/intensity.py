# linelag/analyzer/intensity.py - Latency to color intensity mapping
"""
Maps line latencies to a red intensity and a fixed column width.
"""

from dataclasses import dataclass

from linelag.utils.helpers import check_duration, duration_as_unit, validate_unit


MAX_INTENSITY = 255


@dataclass(frozen=True)
class RenderedLatency:
    """
    Per-line values handed to the renderer.
    """
    since_last_ns: int
    intensity: int
    is_max: bool = False


def intensity(since_last_ns: int, max_latency_ns: int, min_latency_ns: int) -> int:
    """
    Scale a latency to the range [0, 255] relative to the run's maximum.

    Latencies at or below min_latency_ns map to 0.

    Args:
        since_last_ns: Latency of the line
        max_latency_ns: Largest latency of the run (at least 1ms)
        min_latency_ns: Threshold below which lines are not highlighted

    Returns:
        Intensity between 0 and 255 inclusive
    """
    if since_last_ns <= min_latency_ns:
        return 0

    check_duration(since_last_ns)
    check_duration(max_latency_ns)

    value = MAX_INTENSITY * since_last_ns // max_latency_ns
    # The first line is not part of the maximum and may exceed it
    return max(0, min(MAX_INTENSITY, value))


def display_width(max_latency_ns: int, unit: str) -> int:
    """
    Digits needed to show the run's maximum latency in the given unit.

    Args:
        max_latency_ns: Largest latency of the run
        unit: Latency unit symbol

    Returns:
        Column width, at least 1
    """
    return len(str(duration_as_unit(max_latency_ns, unit)))


class IntensityMapper:
    """
    Applies the run-wide maximum and threshold to individual lines.
    """

    def __init__(self, max_latency_ns: int, min_latency_ns: int, unit: str):
        self.max_latency_ns = max_latency_ns
        self.min_latency_ns = min_latency_ns
        self.unit = validate_unit(unit)
        self.width = display_width(max_latency_ns, unit)

    def map(self, since_last_ns: int) -> RenderedLatency:
        return RenderedLatency(
            since_last_ns=since_last_ns,
            intensity=intensity(since_last_ns, self.max_latency_ns, self.min_latency_ns),
            is_max=since_last_ns == self.max_latency_ns,
        )
