"""
Image extent computation for a trace.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple

from signature_svg.data.trace import Segment

Bounds = Tuple[float, float]

ORIGIN: Bounds = (0, 0)


def update_bounds(bounds: Bounds, segment: Segment) -> Bounds:
    """Raise the running (max_x, max_y) pair with one segment's values."""
    maxima = list(bounds)
    for i, value in enumerate(segment):
        axis = i % 2
        if value > maxima[axis]:
            maxima[axis] = value
    return maxima[0], maxima[1]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def finalize_bound(maximum: float, pen_width: float) -> int:
    """Size of one axis: the furthest point plus half the pen, rounded once."""
    return round_half_away(maximum + pen_width / 2)
