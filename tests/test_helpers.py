# tests/test_helpers.py - Tests for duration helpers
"""
Unit tests for unit conversion and duration parsing.
"""

import pytest

from linelag.utils.errors import ConfigurationError, LatencyOverflowError
from linelag.utils.helpers import (
    LATENCY_UNITS,
    MAX_DURATION_NS,
    duration_as_unit,
    format_duration,
    parse_duration,
    validate_unit,
)


class TestDurationAsUnit:
    """Test cases for duration_as_unit"""

    def test_truncates_instead_of_rounding(self):
        """Test 1500ms in seconds is 1"""
        assert duration_as_unit(1_500_000_000, 's') == 1

    def test_all_units(self):
        """Test conversion of one day into every unit"""
        day_ns = 86_400 * 1_000_000_000

        assert duration_as_unit(day_ns, 'ns') == day_ns
        assert duration_as_unit(day_ns, 'us') == 86_400_000_000
        assert duration_as_unit(day_ns, 'ms') == 86_400_000
        assert duration_as_unit(day_ns, 's') == 86_400
        assert duration_as_unit(day_ns, 'm') == 1_440
        assert duration_as_unit(day_ns, 'h') == 24
        assert duration_as_unit(day_ns, 'd') == 1

    def test_sub_unit_duration_is_zero(self):
        """Test durations shorter than one unit convert to 0"""
        assert duration_as_unit(999_999, 'ms') == 0
        assert duration_as_unit(59 * 1_000_000_000, 'm') == 0

    def test_unknown_unit(self):
        """Test an unknown unit is a configuration error"""
        with pytest.raises(ConfigurationError):
            duration_as_unit(1000, 'xyz')

    def test_negative_duration(self):
        """Test negative durations are rejected"""
        with pytest.raises(LatencyOverflowError):
            duration_as_unit(-1, 'ms')

    def test_overflowing_duration(self):
        """Test durations beyond 64-bit nanoseconds are rejected"""
        assert duration_as_unit(MAX_DURATION_NS, 'ns') == MAX_DURATION_NS

        with pytest.raises(LatencyOverflowError):
            duration_as_unit(MAX_DURATION_NS + 1, 's')


class TestValidateUnit:
    """Test cases for validate_unit"""

    def test_known_units(self):
        """Test the seven supported units"""
        assert LATENCY_UNITS == ('ns', 'us', 'ms', 's', 'm', 'h', 'd')
        for unit in LATENCY_UNITS:
            assert validate_unit(unit) == unit

    @pytest.mark.parametrize('unit', ['', 'MS', 'sec', 'µs', 'w'])
    def test_rejects_other_values(self, unit):
        """Test anything else is rejected"""
        with pytest.raises(ConfigurationError):
            validate_unit(unit)


class TestParseDuration:
    """Test cases for parse_duration"""

    @pytest.mark.parametrize('text,expected', [
        ('1ms', 1_000_000),
        ('0ns', 0),
        ('250us', 250_000),
        ('250µs', 250_000),
        ('2s', 2_000_000_000),
        ('1m30s', 90_000_000_000),
        ('1h', 3_600_000_000_000),
        ('1d', 86_400_000_000_000),
        (' 10 ms ', 10_000_000),
    ])
    def test_valid_durations(self, text, expected):
        """Test parsing well-formed durations"""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize('text', ['', 'ms', '5', '1.5s', '-1ms', '1 fortnight', 'abc'])
    def test_invalid_durations(self, text):
        """Test malformed durations are configuration errors"""
        with pytest.raises(ConfigurationError):
            parse_duration(text)

    def test_overflow(self):
        """Test durations too large for nanoseconds are rejected"""
        with pytest.raises(ConfigurationError):
            parse_duration('999999999d')


def test_format_duration():
    """Test human-readable duration formatting"""
    assert format_duration(500) == "500ns"
    assert format_duration(1_500) == "1.5us"
    assert format_duration(2_500_000) == "2.5ms"
    assert format_duration(3_000_000_000) == "3.0s"
