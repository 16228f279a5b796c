# linelag/exporters/__init__.py - Exporters module
"""
Exporters for writing highlighted lines.

This module provides:
- stdout.py: Console renderer with true-color swatches
"""
