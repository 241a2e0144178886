"""
Normalization of signature pad output into an ordered list of line segments.

The signature pad widget serializes a drawing as a JSON array of objects such as
``{"lx": 45, "ly": 42, "mx": 45, "my": 72}``. Key names are not interpreted:
only the order of the four values matters (start x, start y, end x, end y).
"""

import json
import logging
import math
import numbers
from collections.abc import Mapping
from typing import Any, Sequence, Tuple, Union

import numpy as np

from signature_svg.errors import InvalidInputError, ParseError, ParseFailure

logger = logging.getLogger(__name__)

Segment = Tuple[float, float, float, float]
Trace = Tuple[Segment, ...]
TraceInput = Union[str, bytes, bytearray, Sequence[Any], np.ndarray]

SEGMENT_SIZE = 4


def decode_trace_text(text: Union[str, bytes, bytearray]) -> list:
    """
    Decode JSON text into a list of raw records.

    Raises:
        ParseError: with the most specific failure reason the decoder exposes.
    """
    try:
        decoded = json.loads(text)
    except RecursionError as e:
        raise ParseError(ParseFailure.DEPTH) from e
    except json.JSONDecodeError as e:
        if e.msg.startswith("Invalid control character"):
            reason = ParseFailure.CONTROL_CHARACTER
        else:
            reason = ParseFailure.SYNTAX
        raise ParseError(reason, detail=str(e), lineno=e.lineno, colno=e.colno) from e
    except ValueError as e:
        # Undecodable bytes end up here.
        raise ParseError(ParseFailure.UNKNOWN, detail=str(e)) from e

    if not isinstance(decoded, list):
        raise ParseError(
            ParseFailure.UNKNOWN,
            detail=f"expected a JSON array, got {type(decoded).__name__}",
        )
    return decoded


def flatten_record(record: Any, index: int) -> Segment:
    """
    Flatten one record into a ``(x1, y1, x2, y2)`` tuple by value order.

    Mappings contribute their values in insertion order; lists, tuples and
    array rows contribute their items.
    """
    if isinstance(record, Mapping):
        values = list(record.values())
    elif isinstance(record, np.ndarray):
        values = record.tolist()
    elif isinstance(record, (list, tuple)):
        values = list(record)
    else:
        raise ParseError(
            ParseFailure.RECORD,
            detail=f"record {index} is a {type(record).__name__}, expected an object or array",
        )

    if len(values) != SEGMENT_SIZE:
        raise ParseError(
            ParseFailure.RECORD,
            detail=f"record {index} has {len(values)} values, expected {SEGMENT_SIZE}",
        )

    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ParseError(
                ParseFailure.RECORD,
                detail=f"record {index} holds non-numeric value {value!r}",
            )
        try:
            finite = math.isfinite(value)
        except OverflowError:  # int beyond float range
            finite = False
        if not finite:
            raise ParseError(
                ParseFailure.RECORD,
                detail=f"record {index} holds non-finite value {value!r}",
            )

    return tuple(values)


def _records_from_array(array: np.ndarray) -> list:
    if array.size == 0:
        return []
    if array.ndim != 2 or array.shape[1] != SEGMENT_SIZE:
        raise ParseError(
            ParseFailure.RECORD,
            detail=f"expected an array of shape (N, {SEGMENT_SIZE}), got {tuple(array.shape)}",
        )
    return array.tolist()


def normalize_trace(data: TraceInput) -> Trace:
    """
    Turn signature pad output into an immutable, ordered trace.

    Args:
        data: JSON text (``str`` or UTF-8 ``bytes``), an already decoded list of
            records (mappings or 4-item sequences), or an ``(N, 4)`` numpy array.

    Returns:
        Tuple of ``(x1, y1, x2, y2)`` tuples in input order.

    Raises:
        ParseError: text cannot be decoded, or a record is not four numbers.
        InvalidInputError: ``data`` is not one of the accepted input types.
    """
    if isinstance(data, (str, bytes, bytearray)):
        records = decode_trace_text(data)
        source = "text"
    elif isinstance(data, np.ndarray):
        records = _records_from_array(data)
        source = "array"
    elif isinstance(data, (list, tuple)):
        records = data
        source = "records"
    else:
        raise InvalidInputError(type(data))

    trace = tuple(flatten_record(record, i) for i, record in enumerate(records))
    logger.debug(f"Normalized {len(trace)} segments from {source} input")
    return trace
