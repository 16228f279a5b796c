# linelag/__init__.py
"""
linelag - highlight lines of program output by the latency between them.
"""

__version__ = "0.1.0"
