"""
Tests for scalar encoding (core/scalar.py)

Covers every supported kind, the 38-digit float format and the values that
encode to nothing.
"""

import asyncio
import base64
import json
import queue
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest

from dynamodb_codec.core.scalar import encode_binary, encode_opaque, encode_scalar, format_float
from dynamodb_codec.exceptions import EncodingError

from tests.helpers import Color, Point, UserKey


class TestNumbers:
    """Test numeric encodings."""

    def test_integers(self):
        assert encode_scalar(0) == "0"
        assert encode_scalar(42) == "42"
        assert encode_scalar(-7) == "-7"
        assert encode_scalar(10 ** 30) == "1" + "0" * 30

    def test_booleans_encode_as_digits(self):
        assert encode_scalar(True) == "1"
        assert encode_scalar(False) == "0"

    def test_float_without_fraction_has_no_trailing_zeros(self):
        assert encode_scalar(1.0) == "1"
        assert encode_scalar(2.5) == "2.5"

    def test_float_keeps_full_precision(self):
        """A float survives the 38-digit format exactly."""
        value = 123456789012345.125
        encoded = format_float(value)

        assert float(encoded) == value
        assert encoded == "123456789012345.125"

    def test_float_repr_round_trip(self):
        for value in [0.1, 1 / 3, -2.718281828459045, 1e-7, 6.02214076e23]:
            assert float(encode_scalar(value)) == value

    def test_large_float_uses_exponent(self):
        encoded = encode_scalar(1e40)
        assert "E+40" in encoded
        assert float(encoded) == 1e40

    def test_small_float_uses_exponent(self):
        encoded = encode_scalar(1.5e-10)
        assert "E-10" in encoded
        assert float(encoded) == 1.5e-10

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_rejected(self, value):
        with pytest.raises(EncodingError):
            encode_scalar(value)

    def test_decimal_is_exact(self):
        assert encode_scalar(Decimal("15.123456789")) == "15.123456789"
        assert encode_scalar(Decimal("-0.000000001")) == "-1E-9"

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(EncodingError):
            encode_scalar(Decimal("NaN"))


class TestText:
    """Test textual encodings."""

    def test_string_is_verbatim(self):
        assert encode_scalar("héllo, world") == "héllo, world"

    def test_bytes_are_base64(self):
        assert encode_scalar(b"\x00\x01binary") == base64.b64encode(b"\x00\x01binary").decode()
        assert encode_scalar(bytearray(b"abc")) == "YWJj"

    def test_temporal_values_use_iso_format(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert encode_scalar(moment) == "2024-01-02T03:04:05+00:00"
        assert encode_scalar(date(2024, 1, 2)) == "2024-01-02"

    def test_uuid(self):
        value = UUID("12345678-1234-5678-1234-567812345678")
        assert encode_scalar(value) == "12345678-1234-5678-1234-567812345678"

    def test_enum_encodes_its_value(self):
        assert encode_scalar(Color.RED) == "red"


class TestOpaqueValues:
    """Test composites that are stored as JSON text."""

    def test_dict(self):
        assert json.loads(encode_scalar({"a": 1, "b": [1, 2]})) == {"a": 1, "b": [1, 2]}

    def test_nested_record(self):
        assert json.loads(encode_scalar(UserKey(user_id="u1", created=5))) == {"user_id": "u1", "created": 5}

    def test_named_tuple(self):
        assert json.loads(encode_scalar(Point(1, 2))) == [1, 2]

    def test_unserializable_content_raises(self):
        with pytest.raises(EncodingError, match="Invalid json"):
            encode_opaque({"lock": object()})


class TestEmptyEncodings:
    """Test values with no representation."""

    def test_none(self):
        assert encode_scalar(None) == ""

    def test_function_like_values(self):
        def generator():
            yield 1

        assert encode_scalar(lambda: 1) == ""
        assert encode_scalar(len) == ""
        assert encode_scalar(generator()) == ""
        assert encode_scalar(queue.Queue()) == ""
        assert encode_scalar(asyncio.Queue()) == ""

    def test_unknown_object_raises(self):
        class Opaque:
            pass

        with pytest.raises(EncodingError, match="Invalid data type"):
            encode_scalar(Opaque())


class TestBinaryEncoding:
    """Test values forced to B."""

    def test_text_is_encoded_as_utf8(self):
        assert encode_binary("hi") == base64.b64encode(b"hi").decode()

    def test_empty_text_encodes_to_nothing(self):
        assert encode_binary("") == ""

    def test_bytes_pass_through(self):
        assert encode_binary(b"hi") == "aGk="
