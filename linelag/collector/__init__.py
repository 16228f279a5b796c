# linelag/collector/__init__.py - Input collection module
"""
Collector module for capturing input lines as they arrive.

This module provides:
- clock.py: Monotonic and wall-clock timestamp source
- line_reader.py: Line splitting, timestamping and echo
"""
