"""
Signature pad trace to SVG conversion.

Example:
    sig = '[{"lx":45,"ly":42,"mx":45,"my":72},{"lx":41,"ly":36,"mx":95,"my":42}]'
    svg = SignatureToSvg(sig, {"penWidth": 5})
    headers = {"Content-Type": SignatureToSvg.get_mime_type()}
    body = svg.get_image()
"""

import logging
from typing import Any, Dict, Mapping, Optional

from signature_svg.data.trace import Trace, TraceInput, normalize_trace
from signature_svg.rendering.svg import render_svg, render_svg_gz
from signature_svg.utils.config import StrokeConfig

logger = logging.getLogger(__name__)

MIME_TYPE = "image/svg+xml"


class SignatureToSvg:
    """
    A signature trace bound to its stroke styling.

    The trace is normalized once at construction; the SVG document is rebuilt
    on every request. Instances are never mutated, so one instance can be
    rendered from several threads.
    """

    def __init__(self, data: TraceInput, options: Optional[Mapping[str, Any]] = None):
        """
        Args:
            data: JSON string (or UTF-8 bytes) from the signature pad, a decoded
                list of coordinate records, or an (N, 4) numpy array
            options: title, penWidth and penColour overrides; other keys are kept
                but unused

        Raises:
            InvalidInputError: if data is not text, a list of records or an array
            ParseError: if data cannot be decoded into coordinate records
        """
        self._config = StrokeConfig.from_options(options)
        self._trace = normalize_trace(data)
        logger.debug(f"Created signature with {len(self._trace)} segments")

    @staticmethod
    def get_mime_type() -> str:
        """Media type of the documents produced by get_image."""
        return MIME_TYPE

    @property
    def trace(self) -> Trace:
        return self._trace

    @property
    def config(self) -> StrokeConfig:
        return self._config

    @property
    def options(self) -> Dict[str, Any]:
        return self._config.as_options()

    def get_image(self) -> str:
        """Full SVG document text."""
        return render_svg(self._trace, self._config)

    def get_image_gz(self) -> bytes:
        """
        SVG document compressed with gzip at level 9.

        Raises:
            CapabilityError: if gzip support is unavailable
        """
        return render_svg_gz(self._trace, self._config)

    def __len__(self) -> int:
        return len(self._trace)

    def __repr__(self):
        return (
            f"SignatureToSvg(segments={len(self._trace)}, "
            f"title={self._config.title!r}, penWidth={self._config.pen_width})"
        )
