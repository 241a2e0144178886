"""
SVG document assembly for normalized signature traces.
"""

import html
import logging

from signature_svg.data.trace import Segment, Trace
from signature_svg.errors import CapabilityError
from signature_svg.rendering.bounds import ORIGIN, finalize_bound, update_bounds
from signature_svg.utils.config import StrokeConfig

try:
    import gzip
except ImportError:  # interpreter built without zlib
    gzip = None  # type: ignore

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
GZIP_LEVEL = 9


def format_line(segment: Segment) -> str:
    """Line element for one segment; coordinates are truncated toward zero."""
    x1, y1, x2, y2 = (int(value) for value in segment)
    return f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}"/>'


def render_svg(trace: Trace, config: StrokeConfig) -> str:
    """
    Build the full SVG document for a trace.

    Line elements are emitted in trace order while the bounds are folded over
    the same segments; the document size is the furthest point on each axis
    plus half the pen width.

    Args:
        trace: Normalized segments
        config: Stroke styling

    Returns:
        SVG document text
    """
    bounds = ORIGIN
    lines = []
    for segment in trace:
        lines.append(format_line(segment))
        bounds = update_bounds(bounds, segment)

    width = finalize_bound(bounds[0], config.pen_width)
    height = finalize_bound(bounds[1], config.pen_width)
    logger.debug(f"Rendering {len(lines)} lines into a {width}x{height} image")

    title = html.escape(str(config.title), quote=True)
    return (
        '<?xml version="1.0"?>'
        f'<svg baseProfile="tiny" width="{width}" height="{height}" version="1.2" xmlns="{SVG_NAMESPACE}">'
        f'<g fill="red" stroke="{config.pen_colour}" stroke-width="{int(config.pen_width)}" '
        'stroke-linecap="round" stroke-linejoin="round">'
        f"<title>{title}</title>"
        f"{''.join(lines)}"
        "</g></svg>"
    )


def render_svg_gz(trace: Trace, config: StrokeConfig) -> bytes:
    """
    Gzip the SVG document at maximum compression.

    The gzip header timestamp is fixed so identical documents compress to
    identical bytes.

    Raises:
        CapabilityError: if gzip support is unavailable.
    """
    if gzip is None:
        raise CapabilityError("Cannot get gzip image. Check that zlib is available.")

    document = render_svg(trace, config).encode("utf-8")
    compressed = gzip.compress(document, compresslevel=GZIP_LEVEL, mtime=0)
    logger.debug(f"Compressed SVG from {len(document)} to {len(compressed)} bytes")
    return compressed
