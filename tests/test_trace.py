"""
Tests for trace normalization.
"""

import json

import numpy as np
import pytest

from signature_svg.data.trace import flatten_record, normalize_trace
from signature_svg.errors import ErrorKind, InvalidInputError, ParseError, ParseFailure

SIG_JSON = (
    '[{"lx":45,"ly":42,"mx":45,"my":72},'
    '{"lx":41,"ly":36,"mx":95,"my":42},'
    '{"lx":77,"ly":28,"mx":41,"my":36}]'
)


class TestTextInput:
    """Tests for JSON text input."""

    def test_record_count_and_order(self):
        """Each record becomes one 4-tuple, in input order."""
        trace = normalize_trace(SIG_JSON)

        assert len(trace) == 3
        assert trace[0] == (45, 42, 45, 72)
        assert trace[1] == (41, 36, 95, 42)
        assert trace[2] == (77, 28, 41, 36)

    def test_keys_are_ignored(self):
        """Only value order matters, not key names."""
        trace = normalize_trace('[{"d":1,"c":2,"b":3,"a":4}]')
        assert trace == ((1, 2, 3, 4),)

    def test_bytes_input(self):
        assert normalize_trace(SIG_JSON.encode("utf-8")) == normalize_trace(SIG_JSON)

    def test_empty_list(self):
        assert normalize_trace("[]") == ()

    def test_matches_decoded_input(self):
        """Text and the equivalent decoded list give the same trace."""
        assert normalize_trace(SIG_JSON) == normalize_trace(json.loads(SIG_JSON))

    def test_trace_is_immutable(self):
        trace = normalize_trace(SIG_JSON)
        assert isinstance(trace, tuple)
        assert all(isinstance(segment, tuple) for segment in trace)


class TestParseErrors:
    """Tests for malformed text input."""

    def test_truncated_json(self):
        """Truncated JSON is a parse error, not an input type error."""
        with pytest.raises(ParseError) as excinfo:
            normalize_trace("[{")

        assert not isinstance(excinfo.value, InvalidInputError)
        assert excinfo.value.reason is ParseFailure.SYNTAX
        assert excinfo.value.kind is ErrorKind.PARSE
        assert excinfo.value.code == 1000
        assert "Syntax error" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_syntax_error_position(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace('[{"lx": 1,}]')
        assert excinfo.value.lineno == 1
        assert excinfo.value.colno is not None

    def test_control_character(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace('[{"lx": "4\n5"}]')
        assert excinfo.value.reason is ParseFailure.CONTROL_CHARACTER
        assert "control character" in str(excinfo.value)

    def test_nesting_depth(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace("[" * 100000)
        assert excinfo.value.reason is ParseFailure.DEPTH
        assert "depth" in str(excinfo.value)

    def test_invalid_utf8(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace(b"[\x80]")
        assert excinfo.value.reason is ParseFailure.UNKNOWN

    @pytest.mark.parametrize("text", ["null", "5", '{"lx": 1}', '"abc"'])
    def test_non_array_document(self, text):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace(text)
        assert excinfo.value.reason is ParseFailure.UNKNOWN
        assert str(excinfo.value).startswith("Cannot decode the JSON string.")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_trace("not json")


class TestRecordInput:
    """Tests for already decoded input."""

    def test_mappings(self):
        records = [{"lx": 1, "ly": 2, "mx": 3, "my": 4}]
        assert normalize_trace(records) == ((1, 2, 3, 4),)

    def test_tuples_and_lists(self):
        records = [(1, 2, 3, 4), [5, 6, 7, 8]]
        assert normalize_trace(records) == ((1, 2, 3, 4), (5, 6, 7, 8))

    def test_tuple_of_records(self):
        assert normalize_trace(((1, 2, 3, 4),)) == ((1, 2, 3, 4),)

    def test_floats_kept(self):
        assert normalize_trace([(1.5, 2.25, 3, 4)]) == ((1.5, 2.25, 3, 4),)

    def test_numpy_array(self):
        array = np.array([[45, 42, 45, 72], [41, 36, 95, 42]])
        trace = normalize_trace(array)
        assert trace == ((45, 42, 45, 72), (41, 36, 95, 42))
        assert trace == normalize_trace(SIG_JSON)[:2]

    def test_empty_numpy_array(self):
        assert normalize_trace(np.zeros((0, 4))) == ()

    def test_numpy_array_wrong_shape(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace(np.zeros((2, 3)))
        assert excinfo.value.reason is ParseFailure.RECORD

    def test_numpy_rows_in_list(self):
        rows = list(np.array([[1, 2, 3, 4]]))
        assert normalize_trace(rows) == ((1, 2, 3, 4),)


class TestRecordValidation:
    """Tests for records that are not four numbers."""

    @pytest.mark.parametrize(
        "record",
        [
            {"lx": 1, "ly": 2, "mx": 3},
            [1, 2, 3, 4, 5],
            [],
        ],
    )
    def test_wrong_arity(self, record):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace([record])
        assert excinfo.value.reason is ParseFailure.RECORD
        assert "record 0" in str(excinfo.value)

    @pytest.mark.parametrize("value", ["4", None, True, [1]])
    def test_non_numeric_value(self, value):
        with pytest.raises(ParseError):
            normalize_trace([[1, 2, 3, value]])

    def test_non_finite_value(self):
        with pytest.raises(ParseError):
            normalize_trace('[{"lx": 1, "ly": 2, "mx": 3, "my": NaN}]')

    def test_integer_beyond_float_range(self):
        """Integers too large for a float are rejected, not left to overflow."""
        with pytest.raises(ParseError) as excinfo:
            normalize_trace("[[1, 2, 3, 1" + "0" * 400 + "]]")
        assert excinfo.value.reason is ParseFailure.RECORD
        assert "non-finite" in str(excinfo.value)

    def test_integer_beyond_float_range_in_list(self):
        with pytest.raises(ParseError):
            normalize_trace([(10 ** 400, 2, 3, 4)])

    def test_record_not_a_container(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace([1, 2, 3, 4])
        assert "record 0" in str(excinfo.value)

    def test_string_record_rejected(self):
        with pytest.raises(ParseError):
            flatten_record("1234", 3)

    def test_error_names_record_index(self):
        with pytest.raises(ParseError) as excinfo:
            normalize_trace([(1, 2, 3, 4), (1, 2, 3)])
        assert "record 1" in str(excinfo.value)

    def test_negative_values_allowed(self):
        assert normalize_trace([(-1, -2, 3, 4)]) == ((-1, -2, 3, 4),)


class TestInvalidInput:
    """Tests for unsupported input types."""

    @pytest.mark.parametrize("data", [5, 4.2, None, {"lx": 1}, {1, 2}, object()])
    def test_rejected_types(self, data):
        with pytest.raises(InvalidInputError) as excinfo:
            normalize_trace(data)
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT
        assert excinfo.value.code == 1001

    def test_invalid_input_is_type_error(self):
        with pytest.raises(TypeError):
            normalize_trace(42)

    def test_invalid_input_is_not_parse_error(self):
        with pytest.raises(InvalidInputError) as excinfo:
            normalize_trace(42)
        assert not isinstance(excinfo.value, ParseError)
        assert "int" in str(excinfo.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
