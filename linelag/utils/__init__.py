# linelag/utils/__init__.py - Utilities module
"""
Utility functions and helpers.

This module provides:
- config.py: Configuration management and validated Settings
- errors.py: Exception types
- logger.py: Logging setup
- helpers.py: Duration parsing and unit conversion
"""
