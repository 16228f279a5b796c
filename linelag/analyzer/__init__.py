# linelag/analyzer/__init__.py - Analysis module
"""
Analyzer module for turning arrival times into highlight values.

This module provides:
- latency_analyzer.py: Inter-line latency and the run's maximum
- intensity.py: Latency to color intensity and column width mapping
"""
