"""
DynamoDB Codec Utilities

Helpers shared by the read/write APIs:

- Request validation (table names, key attribute types, throughput)
- Condition building for Query KeyConditions and Scan ScanFilter
- Key resolution from records or ready-made attribute sets
"""

import re
from typing import Any, Dict, Mapping, Optional

from .core.fields import is_record
from .core.marshal import encode_value, marshal_attributes
from .exceptions import ValidationError
from .models import (
    MAX_TABLE_NAME_LENGTH,
    MIN_TABLE_NAME_LENGTH,
    AttributeSet,
    AttributeValue,
    ComparisonOperator,
    Condition,
    WireCategory,
)

TABLE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]+$")
KEY_ATTRIBUTE_TYPES = frozenset({WireCategory.STRING, WireCategory.NUMBER, WireCategory.BINARY})

# Number of AttributeValueList entries each operator takes; None means any.
OPERATOR_ARITY: Dict[ComparisonOperator, Optional[int]] = {
    ComparisonOperator.EQ: 1,
    ComparisonOperator.NE: 1,
    ComparisonOperator.LE: 1,
    ComparisonOperator.LT: 1,
    ComparisonOperator.GE: 1,
    ComparisonOperator.GT: 1,
    ComparisonOperator.BEGINS_WITH: 1,
    ComparisonOperator.BETWEEN: 2,
    ComparisonOperator.CONTAINS: 1,
    ComparisonOperator.NOT_CONTAINS: 1,
    ComparisonOperator.NOT_NULL: 0,
    ComparisonOperator.NULL: 0,
    ComparisonOperator.IN: None,
}


# =============================================================================
# Request Validation
# =============================================================================

def validate_table_name(table_name: str) -> str:
    """Check a table name against DynamoDB's naming rules.

    Raises:
        ValidationError: Length outside 3..255 or characters outside [a-zA-Z0-9_.-]
    """
    if not table_name or not MIN_TABLE_NAME_LENGTH <= len(table_name) <= MAX_TABLE_NAME_LENGTH:
        raise ValidationError(
            f"Table name must be between {MIN_TABLE_NAME_LENGTH} and {MAX_TABLE_NAME_LENGTH} characters",
            {'table_name': table_name}
        )
    if not TABLE_NAME_PATTERN.match(table_name):
        raise ValidationError(
            "Table name may only contain letters, digits, '_', '-' and '.'",
            {'table_name': table_name}
        )
    return table_name


def validate_key_type(attribute_type: Any) -> WireCategory:
    """Resolve a key attribute type; only S, N and B may form a key.

    Raises:
        ValidationError: Unknown token or a set type
    """
    category = attribute_type if isinstance(attribute_type, WireCategory) else WireCategory.from_token(attribute_type)
    if category not in KEY_ATTRIBUTE_TYPES:
        raise ValidationError(
            f"Invalid key attribute type '{attribute_type}', expected one of S, N, B",
            {'attribute_type': str(attribute_type)}
        )
    return category


def validate_throughput(read_capacity_units: int, write_capacity_units: int) -> None:
    """
    Raises:
        ValidationError: Either capacity is not positive
    """
    errors = {}
    if read_capacity_units < 1:
        errors['read_capacity_units'] = read_capacity_units
    if write_capacity_units < 1:
        errors['write_capacity_units'] = write_capacity_units
    if errors:
        raise ValidationError("Provisioned throughput must be greater than 0", errors)


# =============================================================================
# Conditions
# =============================================================================

def build_condition(operator: ComparisonOperator, *values: Any) -> Condition:
    """Build a Condition from native comparison values.

    Each value goes through the marshaling pipeline, so ``build_condition(
    ComparisonOperator.BETWEEN, 10, 20)`` yields two N attribute values.

    Raises:
        ValidationError: Wrong number of values for the operator, or a value with no representation
        EncodingError: A value cannot be encoded
    """
    operator = ComparisonOperator(operator)
    arity = OPERATOR_ARITY[operator]
    if arity is not None and len(values) != arity:
        raise ValidationError(
            f"{operator.value} takes {arity} value(s), got {len(values)}",
            {'operator': operator.value}
        )
    if operator is ComparisonOperator.IN and not values:
        raise ValidationError("IN takes at least one value", {'operator': operator.value})

    attribute_values = []
    for value in values:
        attribute = encode_value(value)
        if not attribute.is_valid():
            raise ValidationError(f"Comparison value {value!r} has no DynamoDB representation")
        attribute_values.append(attribute)

    return Condition(comparison_operator=operator, attribute_value_list=attribute_values or None)


def build_key_conditions(
    hash_key: str,
    hash_value: Any,
    range_key: Optional[str] = None,
    range_operator: ComparisonOperator = ComparisonOperator.EQ,
    *range_values: Any
) -> Dict[str, Condition]:
    """Build Query KeyConditions for a hash key and an optional range key.

    Examples:
        >>> build_key_conditions('user_id', 'u1')
        >>> build_key_conditions('user_id', 'u1', 'created', ComparisonOperator.BETWEEN, 100, 200)
    """
    conditions = {hash_key: build_condition(ComparisonOperator.EQ, hash_value)}
    if range_key:
        conditions[range_key] = build_condition(range_operator, *range_values)
    return conditions


# =============================================================================
# Keys
# =============================================================================

def resolve_attributes(source: Any) -> AttributeSet:
    """Attribute set for a record, or a mapping already holding AttributeValues.

    Raises:
        InvalidRecordError: The source is neither
    """
    if isinstance(source, Mapping) and not is_record(source):
        if all(isinstance(value, AttributeValue) for value in source.values()):
            return dict(source)
    return marshal_attributes(source)


def key_identifier(key: AttributeSet) -> str:
    """Readable identifier of a key for logs and error context, e.g. 'user_id=u1,created=17'."""
    parts = []
    for name, value in key.items():
        member = getattr(value, value.category.value) if value.is_valid() else None
        parts.append(f"{name}={member}")
    return ",".join(parts)


__all__ = [
    "KEY_ATTRIBUTE_TYPES",
    "OPERATOR_ARITY",
    "TABLE_NAME_PATTERN",
    "build_condition",
    "build_key_conditions",
    "key_identifier",
    "resolve_attributes",
    "validate_key_type",
    "validate_table_name",
    "validate_throughput",
]
