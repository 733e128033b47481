"""
Type Inference

Decides which wire category a native Python value is stored as.

Every value is first classified into a ``Kind``; the category then comes
from one of two explicit tables:

- SCALAR_CATEGORIES: kind of a non-collection value -> category
- ELEMENT_CATEGORIES: element kind -> set category (a sequence's first
  non-None element decides; every member of a set must agree)

Kinds missing from ELEMENT_CATEGORIES (nested collections, callables,
unknown objects) cannot form a set and raise EncodingError.

This module also owns the emptiness predicate applied to raw field values
and the compatibility check for forced wire types.
"""

import asyncio
import inspect
import queue
import re
import uuid
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Collection, Dict

from ..exceptions import EncodingError, IncompatibleTypeError
from ..models.attributes import WireCategory
from .fields import is_record

NUMBER_PATTERN = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")


class Kind(str, Enum):
    """Runtime shape of a native value, as far as marshaling cares."""
    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    STRING = "string"
    BINARY = "binary"
    TEMPORAL = "temporal"
    IDENTIFIER = "identifier"
    ENUM = "enum"
    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"
    RECORD = "record"
    OPAQUE = "opaque"
    UNKNOWN = "unknown"


NUMERIC_KINDS = frozenset({Kind.BOOL, Kind.INTEGER, Kind.FLOAT, Kind.DECIMAL})
COLLECTION_KINDS = frozenset({Kind.SEQUENCE, Kind.SET})
SIZED_KINDS = frozenset({Kind.STRING, Kind.BINARY, Kind.SEQUENCE, Kind.SET, Kind.MAPPING})

SCALAR_CATEGORIES: Dict[Kind, WireCategory] = {
    Kind.NULL: WireCategory.STRING,
    Kind.BOOL: WireCategory.NUMBER,
    Kind.INTEGER: WireCategory.NUMBER,
    Kind.FLOAT: WireCategory.NUMBER,
    Kind.DECIMAL: WireCategory.NUMBER,
    Kind.STRING: WireCategory.STRING,
    Kind.BINARY: WireCategory.BINARY,
    Kind.TEMPORAL: WireCategory.STRING,
    Kind.IDENTIFIER: WireCategory.STRING,
    Kind.MAPPING: WireCategory.STRING,
    Kind.RECORD: WireCategory.STRING,
    Kind.OPAQUE: WireCategory.STRING,
}

ELEMENT_CATEGORIES: Dict[Kind, WireCategory] = {
    Kind.STRING: WireCategory.STRING_SET,
    Kind.TEMPORAL: WireCategory.STRING_SET,
    Kind.IDENTIFIER: WireCategory.STRING_SET,
    Kind.MAPPING: WireCategory.STRING_SET,
    Kind.RECORD: WireCategory.STRING_SET,
    Kind.BOOL: WireCategory.NUMBER_SET,
    Kind.INTEGER: WireCategory.NUMBER_SET,
    Kind.FLOAT: WireCategory.NUMBER_SET,
    Kind.DECIMAL: WireCategory.NUMBER_SET,
    Kind.BINARY: WireCategory.BINARY_SET,
}


def classify(value: Any) -> Kind:
    """Classify a native value. Order matters: Enum before str/int, bool before int."""
    if value is None:
        return Kind.NULL
    if isinstance(value, Enum):
        return Kind.ENUM
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, Decimal):
        return Kind.DECIMAL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BINARY
    if isinstance(value, (datetime, date, time)):
        return Kind.TEMPORAL
    if isinstance(value, uuid.UUID):
        return Kind.IDENTIFIER
    if is_record(value):
        return Kind.RECORD
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    if isinstance(value, (set, frozenset)):
        return Kind.SET
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if _is_opaque(value):
        return Kind.OPAQUE
    return Kind.UNKNOWN


def _is_opaque(value: Any) -> bool:
    """Function- and channel-like values: stored as nothing."""
    if isinstance(value, type):
        return False
    if inspect.isgenerator(value) or inspect.iscoroutine(value) or inspect.isasyncgen(value):
        return True
    if isinstance(value, (queue.Queue, asyncio.Queue)):
        return True
    return callable(value)


def is_empty_value(value: Any) -> bool:
    """Emptiness predicate on raw field values.

    Sized kinds are empty at length zero, booleans when False, numbers at
    zero, None always. Every other kind is never empty. Enum members are
    judged by their value.
    """
    value = unwrap_enum(value)
    kind = classify(value)
    if kind is Kind.NULL:
        return True
    if kind in SIZED_KINDS:
        return len(value) == 0
    if kind is Kind.BOOL:
        return not value
    if kind in NUMERIC_KINDS:
        return value == 0
    return False


def is_number_string(text: str) -> bool:
    return bool(NUMBER_PATTERN.match(text))


def unwrap_enum(value: Any) -> Any:
    """Replace an Enum member by its value, recursively."""
    while isinstance(value, Enum):
        value = value.value
    return value


def infer_category(value: Any) -> WireCategory:
    """Infer the wire category for a value with no forced type.

    Raises:
        EncodingError: The value has no representation
    """
    value = unwrap_enum(value)
    kind = classify(value)
    if kind in COLLECTION_KINDS:
        return element_category(value)
    category = SCALAR_CATEGORIES.get(kind)
    if category is None:
        raise EncodingError(f"Invalid data type {type(value).__name__}")
    return category


def element_category(values: Collection[Any]) -> WireCategory:
    """Set category for a collection.

    Sequences are decided by their first non-None element. Sets have no
    first element, so every non-None member must map to the same category.

    A collection holding only None elements encodes to nothing, so any set
    category works; STRING_SET is returned.

    Raises:
        EncodingError: An element kind maps to no set category, or a set
            mixes element categories
    """
    present = [element for element in values if element is not None]
    if not present:
        return WireCategory.STRING_SET
    if classify(values) is not Kind.SET:
        return _element_category_of(present[0])
    categories = {_element_category_of(element) for element in present}
    if len(categories) > 1:
        found = ", ".join(sorted(category.value for category in categories))
        raise EncodingError(f"Cannot infer set type for set of mixed element kinds ({found})")
    return categories.pop()


def _element_category_of(element: Any) -> WireCategory:
    element = unwrap_enum(element)
    kind = classify(element)
    category = ELEMENT_CATEGORIES.get(kind)
    if category is None:
        raise EncodingError(
            f"Cannot infer set type for collection of {type(element).__name__} ({kind.value}) elements"
        )
    return category


def check_forced_type(category: WireCategory, value: Any) -> None:
    """Verify a forced wire category fits the value's shape.

    - set categories need a collection
    - NS members must be numeric or numeric strings
    - BS members must be bytes-like or str
    - N needs a numeric value or a numeric string
    - B needs bytes-like or str
    - S accepts anything (composites become JSON)

    Raises:
        IncompatibleTypeError: The category does not fit
    """
    value = unwrap_enum(value)
    kind = classify(value)

    if category.is_set:
        if kind not in COLLECTION_KINDS:
            raise IncompatibleTypeError(category.value, value)
        for element in value:
            if element is not None and not _fits_scalar(category, unwrap_enum(element)):
                raise IncompatibleTypeError(category.value, element)
        return

    if not _fits_scalar(category, value):
        raise IncompatibleTypeError(category.value, value)


def _fits_scalar(category: WireCategory, value: Any) -> bool:
    kind = classify(value)
    if category in (WireCategory.NUMBER, WireCategory.NUMBER_SET):
        return kind in NUMERIC_KINDS or (kind is Kind.STRING and is_number_string(value))
    if category in (WireCategory.BINARY, WireCategory.BINARY_SET):
        return kind in (Kind.BINARY, Kind.STRING)
    if category is WireCategory.STRING_SET:
        return kind not in COLLECTION_KINDS
    return True
