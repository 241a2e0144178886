"""
SignatureToSvg: render signature pad stroke traces as SVG documents
"""

__version__ = "0.1.0"

from signature_svg.errors import (
    CapabilityError,
    ErrorKind,
    InvalidInputError,
    ParseError,
    SignatureError,
)
from signature_svg.signature import MIME_TYPE, SignatureToSvg

__all__ = [
    "__version__",
    "MIME_TYPE",
    "SignatureToSvg",
    "SignatureError",
    "ErrorKind",
    "InvalidInputError",
    "ParseError",
    "CapabilityError",
]
