"""
Input handling for signature pad traces.
"""

from .trace import Segment, Trace, normalize_trace

__all__ = ["Segment", "Trace", "normalize_trace"]
