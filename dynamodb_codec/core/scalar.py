"""
Scalar Encoding

Turns one native value into the string DynamoDB stores for it. An empty
string means "no representation"; the marshaler drops such values.
"""

import base64
import math
from decimal import Decimal
from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from ..exceptions import EncodingError
from .inference import Kind, classify

NUM_DIGITS_PRECISION = 38


def format_float(value: float) -> str:
    """Up to 38 significant digits without trailing zeros, exponent form for very large or small magnitudes."""
    if not math.isfinite(value):
        raise EncodingError(f"Cannot encode non-finite number {value!r}")
    return format(value, f".{NUM_DIGITS_PRECISION}G")


def format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        raise EncodingError(f"Cannot encode non-finite number {value!r}")
    return str(value)


def encode_opaque(value: Any) -> str:
    """Serialize a composite value (mapping, record, sequence) to JSON text."""
    try:
        return to_json(value, bytes_mode='base64').decode('utf-8')
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise EncodingError(f"Invalid json: {e}", original_error=e) from e


def encode_scalar(value: Any) -> str:
    """
    Encode a single value as DynamoDB text.

    - str: unchanged
    - bool: "1" / "0"
    - int: decimal text
    - float: up to 38 significant digits
    - Decimal: its exact text
    - bytes-like: standard base64
    - date/time/datetime: ISO 8601
    - UUID: canonical hyphenated text
    - Enum: encoding of its value
    - mappings, records, lists, sets: JSON text
    - None, callables, generators, queues: "" (nothing)

    Raises:
        EncodingError: The value has no text form
    """
    kind = classify(value)
    if kind is Kind.STRING:
        return value
    if kind is Kind.BOOL:
        return "1" if value else "0"
    if kind is Kind.INTEGER:
        return str(int(value))
    if kind is Kind.FLOAT:
        return format_float(value)
    if kind is Kind.DECIMAL:
        return format_decimal(value)
    if kind is Kind.BINARY:
        return base64.b64encode(bytes(value)).decode('ascii')
    if kind is Kind.TEMPORAL:
        return value.isoformat()
    if kind is Kind.IDENTIFIER:
        return str(value)
    if kind is Kind.ENUM:
        return encode_scalar(value.value)
    if kind in (Kind.MAPPING, Kind.RECORD, Kind.SEQUENCE, Kind.SET):
        return encode_opaque(value)
    if kind in (Kind.NULL, Kind.OPAQUE):
        return ""
    raise EncodingError(f"Invalid data type {type(value).__name__}")


def encode_binary(value: Any) -> str:
    """Encode a value stored as B: bytes as-is, text as its UTF-8 bytes, then base64."""
    if isinstance(value, str):
        return base64.b64encode(value.encode('utf-8')).decode('ascii') if value else ""
    return encode_scalar(value)
