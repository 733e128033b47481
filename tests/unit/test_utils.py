"""
Tests for request validation, condition building and key helpers (utils.py)
"""

import pytest

from dynamodb_codec.exceptions import InvalidRecordError, ValidationError
from dynamodb_codec.models import AttributeValue, ComparisonOperator, WireCategory
from dynamodb_codec.utils import (
    build_condition,
    build_key_conditions,
    key_identifier,
    resolve_attributes,
    validate_key_type,
    validate_table_name,
    validate_throughput,
)

from tests.helpers import Color, UserKey


class TestValidateTableName:
    """Test table naming rules."""

    @pytest.mark.parametrize("name", ["abc", "users_v2", "app.prod-Events", "x" * 255])
    def test_valid(self, name):
        assert validate_table_name(name) == name

    @pytest.mark.parametrize("name", ["", "ab", "x" * 256])
    def test_length(self, name):
        with pytest.raises(ValidationError, match="between 3 and 255"):
            validate_table_name(name)

    @pytest.mark.parametrize("name", ["has space", "semi;colon", "ünicode"])
    def test_characters(self, name):
        with pytest.raises(ValidationError, match="may only contain"):
            validate_table_name(name)


class TestValidateKeyType:
    """Test key attribute type resolution."""

    def test_tokens_and_categories(self):
        assert validate_key_type("S") is WireCategory.STRING
        assert validate_key_type(WireCategory.BINARY) is WireCategory.BINARY

    @pytest.mark.parametrize("attribute_type", ["NS", WireCategory.STRING_SET, "n", "BOOL"])
    def test_invalid(self, attribute_type):
        with pytest.raises(ValidationError):
            validate_key_type(attribute_type)


class TestValidateThroughput:
    """Test provisioned throughput checks."""

    def test_positive(self):
        validate_throughput(1, 1)

    def test_both_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_throughput(0, -1)

        assert exc_info.value.errors == {'read_capacity_units': 0, 'write_capacity_units': -1}


class TestBuildCondition:
    """Test Condition construction from native values."""

    def test_equality(self):
        condition = build_condition(ComparisonOperator.EQ, "u1")

        assert condition.to_wire() == {"ComparisonOperator": "EQ", "AttributeValueList": [{"S": "u1"}]}

    def test_between(self):
        condition = build_condition(ComparisonOperator.BETWEEN, 1.5, 10)

        assert condition.attribute_value_list == [AttributeValue(N="1.5"), AttributeValue(N="10")]

    def test_operator_by_name(self):
        assert build_condition("BEGINS_WITH", "ab").comparison_operator is ComparisonOperator.BEGINS_WITH

    def test_nullary_operator(self):
        """Test NULL and NOT_NULL send no value list."""
        assert build_condition(ComparisonOperator.NOT_NULL).to_wire() == {"ComparisonOperator": "NOT_NULL"}

    def test_in(self):
        condition = build_condition(ComparisonOperator.IN, "a", Color.RED, 3)

        assert condition.attribute_value_list == [AttributeValue(S="a"), AttributeValue(S="red"), AttributeValue(N="3")]

    def test_in_requires_values(self):
        with pytest.raises(ValidationError, match="at least one value"):
            build_condition(ComparisonOperator.IN)

    @pytest.mark.parametrize("operator,values", [
        (ComparisonOperator.EQ, ()),
        (ComparisonOperator.EQ, ("a", "b")),
        (ComparisonOperator.BETWEEN, (1,)),
        (ComparisonOperator.NULL, ("x",)),
    ])
    def test_arity(self, operator, values):
        with pytest.raises(ValidationError, match="value\\(s\\)"):
            build_condition(operator, *values)

    def test_value_without_representation(self):
        with pytest.raises(ValidationError, match="no DynamoDB representation"):
            build_condition(ComparisonOperator.EQ, "")

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            build_condition("LIKE", "a")


class TestBuildKeyConditions:
    """Test Query KeyConditions construction."""

    def test_hash_only(self):
        conditions = build_key_conditions("id", "u1")

        assert list(conditions) == ["id"]
        assert conditions["id"].comparison_operator is ComparisonOperator.EQ

    def test_hash_and_range(self):
        conditions = build_key_conditions("id", "u1", "created", ComparisonOperator.BETWEEN, 100, 200)

        assert conditions["created"].attribute_value_list == [AttributeValue(N="100"), AttributeValue(N="200")]


class TestKeys:
    """Test key resolution helpers."""

    def test_resolve_record(self):
        assert resolve_attributes(UserKey(user_id="u1", created=2)) == {
            "id": AttributeValue(S="u1"),
            "created": AttributeValue(N="2"),
        }

    def test_resolve_attribute_set_is_copied(self):
        key = {"id": AttributeValue(S="u1")}
        resolved = resolve_attributes(key)

        assert resolved == key
        assert resolved is not key

    def test_resolve_plain_dict_is_rejected(self):
        with pytest.raises(InvalidRecordError):
            resolve_attributes({"id": "u1"})

    def test_key_identifier(self):
        key = {"id": AttributeValue(S="u1"), "tags": AttributeValue(SS=("a", "b"))}

        assert key_identifier(key) == "id=u1,tags=('a', 'b')"

    def test_key_identifier_with_invalid_value(self):
        assert key_identifier({"id": AttributeValue()}) == "id=None"
