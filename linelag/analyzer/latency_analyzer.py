# linelag/analyzer/latency_analyzer.py - Inter-line latency analysis
"""
Computes how long each line took to arrive after the one before it.
"""

from functools import reduce
from typing import List
import logging

from linelag.collector.line_reader import AnnotatedLine
from linelag.utils.helpers import format_duration


# Lower bound for the run's maximum latency
MIN_MAX_LATENCY_NS = 1_000_000


class LatencyAnalyzer:
    """
    Analyzes inter-arrival latency for a sequence of lines.

    The first line is measured against the moment reading started, so
    upstream startup delay is visible. That first gap is excluded from
    the maximum.
    """

    def __init__(self, lines: List[AnnotatedLine], started_ns: int):
        """
        Initialize the latency analyzer.

        Args:
            lines: Lines in arrival order
            started_ns: Monotonic reading taken before the first line was read
        """
        self.lines = lines
        self.started_ns = started_ns
        self.logger = logging.getLogger(__name__)

        self.max_latency_ns = self._compute_max_latency()

    def since_last(self, index: int) -> int:
        """
        Latency of a line in nanoseconds.

        Args:
            index: Position of the line in the sequence

        Returns:
            Time since the previous line, or since reading started for
            the first line
        """
        if index == 0:
            previous = self.started_ns
        else:
            previous = self.lines[index - 1].timestamp_ns
        return self.lines[index].timestamp_ns - previous

    def latencies(self) -> List[int]:
        """Latency of every line, in order"""
        return [self.since_last(i) for i in range(len(self.lines))]

    def _compute_max_latency(self) -> int:
        max_latency_ns = reduce(
            max,
            (self.since_last(i) for i in range(1, len(self.lines))),
            MIN_MAX_LATENCY_NS,
        )
        self.logger.debug(f"Max inter-line latency: {format_duration(max_latency_ns)} over {len(self.lines)} lines")
        return max_latency_ns
