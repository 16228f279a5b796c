# linelag/utils/errors.py - Exception types
"""
Exceptions raised by linelag.
"""


class LinelagError(Exception):
    """Base class for all linelag errors"""


class ConfigurationError(LinelagError):
    """
    Invalid configuration value.

    Raised at startup for an unknown latency unit, an unparseable or
    out-of-range duration, or a malformed configuration file.
    """


class LatencyOverflowError(LinelagError):
    """A duration does not fit in the signed 64-bit nanosecond range"""
