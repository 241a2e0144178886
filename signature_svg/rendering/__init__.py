"""
SVG rendering of normalized traces.
"""

from .bounds import finalize_bound, round_half_away, update_bounds
from .svg import render_svg, render_svg_gz

__all__ = [
    "finalize_bound",
    "round_half_away",
    "update_bounds",
    "render_svg",
    "render_svg_gz",
]
