# linelag/exporters/stdout.py - Console output exporter
"""
Writes highlighted lines to stdout.
"""

from datetime import datetime, timezone
from typing import Optional, TextIO
from colorama import Style
import click
import logging

from linelag.analyzer.intensity import RenderedLatency
from linelag.collector.line_reader import AnnotatedLine
from linelag.utils.config import Settings
from linelag.utils.helpers import duration_as_unit


SWATCH = '  '


def truecolor_background(red: int, green: int, blue: int) -> str:
    """ANSI 24-bit background color sequence"""
    return f"\033[48;2;{red};{green};{blue}m"


def format_timestamp(arrived_at: datetime) -> str:
    """Arrival time as e.g. 2024-01-01 12:00:00.000000 UTC"""
    return arrived_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f UTC")


class StdoutExporter:
    """
    Renders one row per line: a red swatch scaled by intensity, the
    right-aligned latency with its unit, an optional debug block and the
    original text.
    """

    def __init__(self, settings: Settings, width: int, stream: Optional[TextIO] = None):
        """
        Initialize the stdout exporter.

        Args:
            settings: Run settings (unit, debug, colors)
            width: Column width for the latency number
            stream: Output stream (stdout if None)
        """
        self.settings = settings
        self.width = width
        self.stream = stream
        self.use_colors = settings.use_colors
        self.logger = logging.getLogger(__name__)

    def format_swatch(self, intensity: int) -> str:
        if not self.use_colors:
            return SWATCH
        return f"{truecolor_background(intensity, 0, 0)}{SWATCH}{Style.RESET_ALL}"

    def format_debug(self, line: AnnotatedLine, latency: RenderedLatency) -> str:
        """
        Diagnostic block: MAX marker, intensity and arrival time.
        """
        if not self.settings.debug:
            return ''
        marker = 'MAX' if latency.is_max else ''
        return f"{marker} | R{latency.intensity} | {format_timestamp(line.arrived_at)} | "

    def format_line(self, line: AnnotatedLine, latency: RenderedLatency) -> str:
        unit = self.settings.latency_unit
        value = duration_as_unit(latency.since_last_ns, unit)
        return (f"{self.format_swatch(latency.intensity)} "
                f"{value:>{self.width}}{unit} "
                f"{self.format_debug(line, latency)} "
                f"{line.text}")

    def print_line(self, line: AnnotatedLine, latency: RenderedLatency):
        """
        Write a single rendered row.

        Args:
            line: Input line
            latency: Latency values for the line
        """
        click.echo(self.format_line(line, latency), file=self.stream, color=True)
