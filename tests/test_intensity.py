# tests/test_intensity.py - Tests for intensity mapping
"""
Unit tests for intensity, display_width and IntensityMapper.
"""

import pytest

from linelag.analyzer.intensity import (
    IntensityMapper,
    MAX_INTENSITY,
    RenderedLatency,
    display_width,
    intensity,
)
from linelag.utils.errors import ConfigurationError

MS = 1_000_000


class TestIntensity:
    """Test cases for intensity"""

    def test_at_or_below_threshold_is_zero(self):
        """Test latencies up to the threshold are not highlighted"""
        assert intensity(0, 10 * MS, MS) == 0
        assert intensity(MS, 10 * MS, MS) == 0
        assert intensity(MS + 1, 10 * MS, MS) > 0

    def test_threshold_applies_even_at_max(self):
        """Test a maximum below the threshold is still not highlighted"""
        assert intensity(5 * MS, 5 * MS, 10 * MS) == 0

    def test_equal_to_max_is_full(self):
        """Test the maximum maps to 255"""
        assert intensity(2_000 * MS, 2_000 * MS, MS) == MAX_INTENSITY
        assert intensity(7_777_777_777, 7_777_777_777, MS) == 255

    def test_equal_to_max_is_full_for_very_long_gaps(self):
        """Test exact integer scaling for gaps beyond float precision"""
        huge = 4_973_935_059_792_196_601

        assert intensity(huge, huge, MS) == 255
        assert intensity(huge - 1, huge, MS) == 254

    def test_scales_linearly_and_truncates(self):
        """Test intensity is floor(255 * latency / max)"""
        assert intensity(5 * MS, 10 * MS, MS) == 127
        assert intensity(2 * MS, 10 * MS, MS) == 51

    def test_clamped_above_max(self):
        """Test latencies over the maximum are clamped to 255"""
        assert intensity(30_000 * MS, 5 * MS, MS) == 255

    def test_always_in_range(self):
        """Test every latency maps into [0, 255]"""
        max_latency = 123_456_789
        for since_last in range(0, 3 * max_latency, 987_654):
            assert 0 <= intensity(since_last, max_latency, MS) <= 255


class TestDisplayWidth:
    """Test cases for display_width"""

    @pytest.mark.parametrize('max_latency_ns,unit,expected', [
        (MS, 'ms', 1),
        (12_345 * MS, 'ms', 5),
        (12_345 * MS, 's', 2),
        (12_345 * MS, 'us', 8),
        (MS, 'ns', 7),
    ])
    def test_digit_count(self, max_latency_ns, unit, expected):
        """Test width is the digit count of the maximum"""
        assert display_width(max_latency_ns, unit) == expected

    def test_zero_in_unit(self):
        """Test a maximum that rounds down to 0 still has width 1"""
        assert display_width(MS, 's') == 1
        assert display_width(MS, 'd') == 1

    def test_unknown_unit(self):
        """Test an unknown unit is a configuration error"""
        with pytest.raises(ConfigurationError):
            display_width(MS, 'xyz')


class TestIntensityMapper:
    """Test cases for IntensityMapper"""

    def test_mapper_initialization(self):
        """Test width is computed once from the maximum"""
        mapper = IntensityMapper(2_500 * MS, MS, 'ms')

        assert mapper.width == 4
        assert mapper.unit == 'ms'

    def test_map(self):
        """Test mapping a latency to render values"""
        mapper = IntensityMapper(2_000 * MS, MS, 'ms')

        assert mapper.map(2_000 * MS) == RenderedLatency(2_000 * MS, 255, is_max=True)
        assert mapper.map(1_000 * MS) == RenderedLatency(1_000 * MS, 127, is_max=False)
        assert mapper.map(0) == RenderedLatency(0, 0, is_max=False)

    def test_invalid_unit(self):
        """Test the mapper rejects unknown units"""
        with pytest.raises(ConfigurationError):
            IntensityMapper(MS, MS, 'weeks')
