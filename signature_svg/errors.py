"""
Error types raised while building or rendering a signature.

Every error carries an ``ErrorKind`` so callers can branch on the category
without matching messages. The enum values are the numeric codes the
signature pad server scripts have always reported.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of failure categories."""

    PARSE = 1000
    INVALID_INPUT = 1001
    CAPABILITY = 2000


class ParseFailure(Enum):
    """Most specific reason a trace could not be decoded."""

    DEPTH = "Maximum stack depth exceeded"
    CONTROL_CHARACTER = "Unexpected control character found"
    SYNTAX = "Syntax error, malformed JSON"
    UNKNOWN = "Unknown error"
    RECORD = "Malformed coordinate record"


class SignatureError(Exception):
    """Base class for all signature conversion errors."""

    kind: ErrorKind

    @property
    def code(self) -> int:
        return self.kind.value


class InvalidInputError(SignatureError, TypeError):
    """Raised when the trace is neither text nor a list of records."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, received: type):
        self.received = received
        super().__init__(
            f"Data passed to constructor is invalid: expected a JSON string or a "
            f"list of coordinate records, got {received.__name__}."
        )


class ParseError(SignatureError, ValueError):
    """Raised when trace data cannot be decoded into coordinate records."""

    kind = ErrorKind.PARSE

    def __init__(
        self,
        reason: ParseFailure = ParseFailure.UNKNOWN,
        detail: Optional[str] = None,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
    ):
        self.reason = reason
        self.detail = detail
        self.lineno = lineno
        self.colno = colno

        if reason is ParseFailure.RECORD:
            message = f"Cannot read the coordinate records. - {detail or reason.value}"
        else:
            message = f"Cannot decode the JSON string. - {reason.value}"
            if detail:
                message += f" ({detail})"
        super().__init__(message)


class CapabilityError(SignatureError, RuntimeError):
    """Raised when the interpreter lacks a facility needed for an operation."""

    kind = ErrorKind.CAPABILITY
