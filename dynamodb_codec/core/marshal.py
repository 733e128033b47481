"""
Attribute Set Builder

Entry point of the marshaling engine: turns a structured record (Pydantic
model, dataclass or NamedTuple) into the AttributeSet DynamoDB stores.

For each declared field, in order:

1. resolve its tag; skip it if ignored (``-``)
2. skip it if its value is empty (DynamoDB cannot store empty attributes)
3. encode it under its forced type, or the inferred one
4. skip it if the encoding produced no valid value
5. reject it if another field already claimed the same wire name

```python
class User(BaseModel):
    user_id: str = dynamo_field("id")
    tags: List[str] = []
    age: int = 0

marshal_attributes(User(user_id="u1", tags=["a", "b"]))
# {'id': AttributeValue(S='u1'), 'tags': AttributeValue(SS=('a', 'b'))}
```
"""

import logging
from typing import Any, Optional

from ..exceptions import (
    DuplicateAttributeError,
    EncodingError,
    InvalidRecordError,
    MarshalInvariantError,
)
from ..models.attributes import AttributeSet, AttributeValue, WireCategory
from .collection import encode_collection, validate_number_members
from .fields import is_record, iter_fields, resolve_field
from .inference import check_forced_type, infer_category, is_empty_value, unwrap_enum
from .scalar import encode_binary, encode_scalar

logger = logging.getLogger(__name__)


def encode_value(value: Any, category: Optional[WireCategory] = None) -> AttributeValue:
    """
    Encode one native value as an AttributeValue.

    Args:
        value: The value to encode
        category: Forced wire category; inferred from the value when None

    Returns:
        AttributeValue, which may be invalid (nothing populated) when the
        value has no representation

    Raises:
        EncodingError: The value cannot be encoded
        IncompatibleTypeError: The forced category does not fit the value
    """
    value = unwrap_enum(value)
    if category is None:
        category = infer_category(value)
    else:
        check_forced_type(category, value)

    if category.is_set:
        encode = encode_binary if category is WireCategory.BINARY_SET else encode_scalar
        members = encode_collection(value, encode)
        if category is WireCategory.NUMBER_SET:
            validate_number_members(members)
        return AttributeValue.of(category, members)

    if category is WireCategory.BINARY:
        return AttributeValue.of(category, encode_binary(value))
    return AttributeValue.of(category, encode_scalar(value))


def marshal_attributes(record: Any) -> AttributeSet:
    """
    Build the AttributeSet for a structured record.

    Args:
        record: Pydantic model, dataclass or NamedTuple instance

    Returns:
        Mapping of wire attribute name to AttributeValue; every value is valid

    Raises:
        InvalidRecordError: The input is None or not a record
        DuplicateAttributeError: Two stored fields share a wire name
        EncodingError: A field value cannot be encoded (carries the field name)
    """
    if record is None:
        logger.error("Cannot marshal None: a record is required")
        raise InvalidRecordError("Expected a record, got None")
    if not is_record(record):
        value_type = type(record).__name__
        logger.error(f"Cannot marshal {value_type}: not a record type")
        raise InvalidRecordError(f"Expected a record, got {value_type}", value_type)

    attributes: AttributeSet = {}
    for declaration in iter_fields(record):
        metadata = resolve_field(declaration.name, declaration.tag)
        if metadata.omitted:
            continue

        if is_empty_value(declaration.value):
            if not metadata.omit_if_empty:
                logger.debug(f"Skipping empty field '{declaration.name}'")
            continue

        attribute = _encode_field(declaration.name, declaration.value, metadata.forced_type)
        if not attribute.is_valid():
            if len(attribute.populated()) > 1:
                raise MarshalInvariantError(
                    f"Field '{declaration.name}' encoded to {len(attribute.populated())} populated members"
                )
            logger.debug(f"Skipping field '{declaration.name}': no representable value")
            continue

        if metadata.wire_name in attributes:
            logger.error(f"Duplicate attribute name '{metadata.wire_name}' on field '{declaration.name}'")
            raise DuplicateAttributeError(metadata.wire_name, declaration.name)
        attributes[metadata.wire_name] = attribute

    return attributes


def _encode_field(name: str, value: Any, category: Optional[WireCategory]) -> AttributeValue:
    """Encode a field value, converting every encoding failure to EncodingError."""
    try:
        return encode_value(value, category)
    except EncodingError as e:
        logger.error(f"Failed to encode field '{name}': {e.message}")
        raise e.attach_field(name)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode field '{name}': {e}")
        raise EncodingError(f"Failed to encode value: {e}", name, e) from e
