# linelag/collector/line_reader.py - Timestamped line capture
"""
Reads lines from a byte stream and timestamps each one on arrival.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, List, Optional, TextIO
import logging

import click

from linelag.collector.clock import Clock


@dataclass(frozen=True)
class AnnotatedLine:
    """
    A line of input and the moment it arrived.
    """
    text: str
    timestamp_ns: int
    arrived_at: datetime


class LineReader:
    """
    Collects the full input as a list of AnnotatedLine.

    Lines that are not valid UTF-8 are dropped. When echo is enabled each
    line is written out as soon as it is read.
    """

    def __init__(self, echo: bool = True, clock: Optional[Clock] = None,
                 echo_stream: Optional[TextIO] = None):
        """
        Initialize the line reader.

        Args:
            echo: Write each raw line to echo_stream as it arrives
            clock: Timestamp source
            echo_stream: Stream for echoed lines (stdout if None)
        """
        self.echo = echo
        self.clock = clock or Clock()
        self.echo_stream = echo_stream

        self.started_ns: Optional[int] = None
        self.line_count = 0
        self.dropped_count = 0

        self.logger = logging.getLogger(__name__)

    def read(self, stream: BinaryIO) -> List[AnnotatedLine]:
        """
        Read the stream until EOF.

        Args:
            stream: Binary input stream

        Returns:
            Lines in arrival order
        """
        lines: List[AnnotatedLine] = []
        self.started_ns = self.clock.now_ns()

        for raw in iter(stream.readline, b''):
            timestamp_ns = self.clock.now_ns()
            arrived_at = self.clock.wall()

            try:
                text = self._strip_newline(raw).decode('utf-8')
            except UnicodeDecodeError:
                self.dropped_count += 1
                continue

            if self.echo:
                click.echo(text, file=self.echo_stream, color=True)

            lines.append(AnnotatedLine(text=text, timestamp_ns=timestamp_ns, arrived_at=arrived_at))
            self.line_count += 1

        self.logger.debug(f"Read {self.line_count} lines ({self.dropped_count} dropped)")
        return lines

    @staticmethod
    def _strip_newline(raw: bytes) -> bytes:
        if raw.endswith(b'\r\n'):
            return raw[:-2]
        if raw.endswith(b'\n'):
            return raw[:-1]
        return raw
