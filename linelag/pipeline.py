# linelag/pipeline.py - Read, analyze and render
"""
Runs the full highlighting pass over one input stream.
"""

from typing import BinaryIO, Optional, TextIO
import logging

from linelag.analyzer.intensity import IntensityMapper
from linelag.analyzer.latency_analyzer import LatencyAnalyzer
from linelag.collector.clock import Clock
from linelag.collector.line_reader import LineReader
from linelag.exporters.stdout import StdoutExporter
from linelag.utils.config import Settings


logger = logging.getLogger(__name__)


def highlight(stream: BinaryIO, settings: Settings, out: Optional[TextIO] = None,
              clock: Optional[Clock] = None) -> int:
    """
    Read the whole stream, then render every line with its latency.

    All lines are held in memory until EOF because the column width
    depends on the run's maximum latency.

    Args:
        stream: Binary input stream
        settings: Run settings
        out: Output stream for echo and rendered rows (stdout if None)
        clock: Timestamp source

    Returns:
        Number of rendered rows
    """
    reader = LineReader(echo=settings.echo, clock=clock, echo_stream=out)
    lines = reader.read(stream)

    if not lines:
        logger.debug("No input lines")
        return 0

    analyzer = LatencyAnalyzer(lines, reader.started_ns)
    mapper = IntensityMapper(analyzer.max_latency_ns, settings.min_latency_ns, settings.latency_unit)
    exporter = StdoutExporter(settings, mapper.width, stream=out)
    logger.debug(f"Rendering {len(lines)} lines with width {mapper.width}")

    for line, since_last_ns in zip(lines, analyzer.latencies()):
        exporter.print_line(line, mapper.map(since_last_ns))

    return len(lines)
