"""
Tests for type inference (core/inference.py)

Covers the scalar and element decision tables, the emptiness predicate and
forced-type compatibility.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum, IntEnum
from uuid import uuid4

import pytest

from dynamodb_codec.core.inference import (
    ELEMENT_CATEGORIES,
    Kind,
    check_forced_type,
    classify,
    infer_category,
    is_empty_value,
)
from dynamodb_codec.exceptions import EncodingError, IncompatibleTypeError
from dynamodb_codec.models import WireCategory

from tests.helpers import Color, Point, Reading, UserKey


class Level(IntEnum):
    OFF = 0
    ON = 1


class Label(str, Enum):
    NONE = ""
    DRAFT = "draft"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


class TestClassify:
    """Test kind classification order."""

    def test_bool_before_int(self):
        assert classify(True) is Kind.BOOL
        assert classify(1) is Kind.INTEGER

    def test_enum_before_its_value_type(self):
        assert classify(Color.RED) is Kind.ENUM
        assert classify(Priority.HIGH) is Kind.ENUM

    def test_records(self):
        assert classify(UserKey(user_id="u")) is Kind.RECORD
        assert classify(Reading(sensor="s")) is Kind.RECORD
        assert classify(Point(1, 2)) is Kind.RECORD

    def test_plain_tuple_is_a_sequence(self):
        assert classify((1, 2)) is Kind.SEQUENCE

    def test_classes_are_not_opaque(self):
        assert classify(UserKey) is Kind.UNKNOWN


class TestInferCategory:
    """Test category inference for field values."""

    @pytest.mark.parametrize("value,category", [
        ("text", WireCategory.STRING),
        (42, WireCategory.NUMBER),
        (4.2, WireCategory.NUMBER),
        (Decimal("4.2"), WireCategory.NUMBER),
        (True, WireCategory.NUMBER),
        (b"raw", WireCategory.BINARY),
        (datetime(2024, 1, 1), WireCategory.STRING),
        ({"a": 1}, WireCategory.STRING),
        (UserKey(user_id="u"), WireCategory.STRING),
        (Color.BLUE, WireCategory.STRING),
        (Priority.LOW, WireCategory.NUMBER),
    ])
    def test_scalar_values(self, value, category):
        assert infer_category(value) is category

    @pytest.mark.parametrize("value,category", [
        (["a", "b"], WireCategory.STRING_SET),
        ({"a", "b"}, WireCategory.STRING_SET),
        ([uuid4()], WireCategory.STRING_SET),
        ([{"k": 1}], WireCategory.STRING_SET),
        ([UserKey(user_id="u")], WireCategory.STRING_SET),
        ([1, 2], WireCategory.NUMBER_SET),
        ((1.5, 2.5), WireCategory.NUMBER_SET),
        ([Decimal("1")], WireCategory.NUMBER_SET),
        ([True, False], WireCategory.NUMBER_SET),
        ([Priority.LOW], WireCategory.NUMBER_SET),
        ([b"x", b"y"], WireCategory.BINARY_SET),
        ([bytearray(b"x")], WireCategory.BINARY_SET),
    ])
    def test_collections_use_first_element(self, value, category):
        assert infer_category(value) is category

    def test_leading_none_elements_are_skipped(self):
        assert infer_category([None, 3]) is WireCategory.NUMBER_SET

    def test_all_none_collection_is_a_string_set(self):
        assert infer_category([None, None]) is WireCategory.STRING_SET

    def test_nested_collection_cannot_form_a_set(self):
        with pytest.raises(EncodingError, match="Cannot infer set type"):
            infer_category([[1, 2], [3]])

    def test_callable_elements_cannot_form_a_set(self):
        with pytest.raises(EncodingError, match="Cannot infer set type"):
            infer_category([len])

    def test_unknown_value_raises(self):
        with pytest.raises(EncodingError, match="Invalid data type"):
            infer_category(object())

    def test_homogeneous_frozenset(self):
        assert infer_category(frozenset({1, 2.5, Decimal("3")})) is WireCategory.NUMBER_SET

    @pytest.mark.parametrize("value", [frozenset({1, "a"}), {b"x", "x"}, {None, 2, "b"}])
    def test_set_with_mixed_element_kinds_is_rejected(self, value):
        with pytest.raises(EncodingError, match="mixed element kinds"):
            infer_category(value)

    def test_set_with_uninferable_member_is_rejected(self):
        with pytest.raises(EncodingError, match="Cannot infer set type"):
            infer_category({1, len})

    def test_mixed_sequence_uses_first_element(self):
        assert infer_category([1, "a"]) is WireCategory.NUMBER_SET
        assert infer_category(["a", 1]) is WireCategory.STRING_SET

    def test_element_table_has_no_collection_kinds(self):
        assert Kind.SEQUENCE not in ELEMENT_CATEGORIES
        assert Kind.SET not in ELEMENT_CATEGORIES


class TestIsEmptyValue:
    """Test the emptiness predicate on raw values."""

    @pytest.mark.parametrize("value", [None, "", b"", [], (), {}, set(), False, 0, 0.0, Decimal("0")])
    def test_empty(self, value):
        assert is_empty_value(value) is True

    @pytest.mark.parametrize("value", [
        "x", b"x", [0], ("",), {"k": None}, {0}, True, 1, -0.5, Decimal("0.1"),
        Color.RED, UserKey(user_id=""), datetime(2024, 1, 1), len,
    ])
    def test_not_empty(self, value):
        assert is_empty_value(value) is False

    @pytest.mark.parametrize("value", [Level.OFF, Label.NONE])
    def test_enum_judged_by_its_value(self, value):
        assert is_empty_value(value) is True

    @pytest.mark.parametrize("value", [Level.ON, Label.DRAFT, Priority.LOW])
    def test_enum_with_non_empty_value(self, value):
        assert is_empty_value(value) is False


class TestCheckForcedType:
    """Test forced wire type compatibility."""

    def test_numeric_string_fits_number(self):
        check_forced_type(WireCategory.NUMBER, "12345")
        check_forced_type(WireCategory.NUMBER, "-1.5e3")

    def test_non_numeric_string_does_not_fit_number(self):
        with pytest.raises(IncompatibleTypeError) as exc_info:
            check_forced_type(WireCategory.NUMBER, "abc")
        assert exc_info.value.wire_type == "N"
        assert exc_info.value.value_type == "str"

    def test_collection_does_not_fit_number(self):
        with pytest.raises(IncompatibleTypeError):
            check_forced_type(WireCategory.NUMBER, [1, 2])

    def test_string_accepts_anything(self):
        check_forced_type(WireCategory.STRING, 5)
        check_forced_type(WireCategory.STRING, [1, 2])
        check_forced_type(WireCategory.STRING, {"a": 1})

    def test_binary_accepts_bytes_and_text(self):
        check_forced_type(WireCategory.BINARY, b"x")
        check_forced_type(WireCategory.BINARY, "x")
        with pytest.raises(IncompatibleTypeError):
            check_forced_type(WireCategory.BINARY, 5)

    def test_set_requires_collection(self):
        with pytest.raises(IncompatibleTypeError):
            check_forced_type(WireCategory.STRING_SET, "abc")

    def test_number_set_members(self):
        check_forced_type(WireCategory.NUMBER_SET, [1, "2", Decimal("3.5"), None])
        with pytest.raises(IncompatibleTypeError):
            check_forced_type(WireCategory.NUMBER_SET, [1, "two"])

    def test_binary_set_members(self):
        check_forced_type(WireCategory.BINARY_SET, [b"a", "b"])
        with pytest.raises(IncompatibleTypeError):
            check_forced_type(WireCategory.BINARY_SET, [b"a", 1])

    def test_string_set_rejects_nested_collections(self):
        with pytest.raises(IncompatibleTypeError):
            check_forced_type(WireCategory.STRING_SET, [["a"]])
