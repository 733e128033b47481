"""
Record Field Introspection and Metadata Resolution

This is the only module that looks inside record classes. Everything
downstream works on ``FieldDeclaration`` triples (name, value, tag), so the
rest of the marshaling engine never touches Pydantic, dataclass or
NamedTuple internals.

Supported records:
- Pydantic ``BaseModel`` instances (fields in ``model_fields`` order)
- ``dataclasses`` instances (fields in ``dataclasses.fields`` order)
- ``NamedTuple`` instances (fields in ``_fields`` order, no tags)

Tags are comma-separated strings stored under the ``dynamo`` key of the
field's metadata:

```python
class Event(BaseModel):
    event_id: str = dynamo_field("id")
    count: int = dynamo_field(",omitempty", default=0)
    price: str = dynamo_field("price,N")
    scratch: str = dynamo_field("-", default="")

@dataclass
class Point:
    x: float = field(metadata={"dynamo": "px"})
```

Tag grammar:
- ``-`` as the whole tag: the field is never stored
- first segment, if non-empty: the wire attribute name
- ``omitempty``: skip the field when its value is empty
- ``S``, ``N``, ``B``, ``SS``, ``NS``, ``BS``: force the wire type
- anything else is ignored
"""

import dataclasses
from typing import Any, Iterator, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticUndefined

from ..models.attributes import WireCategory

TAG_KEY = "dynamo"
OMIT_EMPTY_TAG = "omitempty"
IGNORE_TAG = "-"


class FieldMetadata(BaseModel):
    """Resolved per-field marshaling behavior."""

    wire_name: str
    forced_type: Optional[WireCategory] = None
    omitted: bool = False
    omit_if_empty: bool = False

    model_config = ConfigDict(frozen=True)


class FieldDeclaration(NamedTuple):
    name: str
    value: Any
    tag: Optional[str] = None


def resolve_field(name: str, tag: Optional[str] = None) -> FieldMetadata:
    """Parse a field's tag into its marshaling metadata.

    Args:
        name: Declared field name, used when the tag names no attribute
        tag: Comma-separated tag string, or None

    Returns:
        FieldMetadata for the field
    """
    if not tag:
        return FieldMetadata(wire_name=name)
    if tag == IGNORE_TAG:
        return FieldMetadata(wire_name=name, omitted=True)

    parts = tag.split(",")
    wire_name = parts[0] or name
    forced_type = None
    omit_if_empty = False
    for flag in parts[1:]:
        if flag == OMIT_EMPTY_TAG:
            omit_if_empty = True
            continue
        category = WireCategory.from_token(flag)
        if category is not None:
            forced_type = category

    return FieldMetadata(wire_name=wire_name, forced_type=forced_type, omit_if_empty=omit_if_empty)


def is_record(value: Any) -> bool:
    """Whether a value is a structured record the marshaler accepts."""
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(value, "_fields")


def iter_fields(record: Any) -> Iterator[FieldDeclaration]:
    """Enumerate a record's fields in declaration order.

    Args:
        record: A value for which is_record() is true

    Yields:
        FieldDeclaration for every declared field

    Raises:
        TypeError: If the value is not a supported record
    """
    if isinstance(record, BaseModel):
        for name, info in type(record).model_fields.items():
            yield FieldDeclaration(name, getattr(record, name), _pydantic_tag(info.json_schema_extra))
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        for field in dataclasses.fields(record):
            yield FieldDeclaration(field.name, getattr(record, field.name), field.metadata.get(TAG_KEY))
    elif isinstance(record, tuple) and hasattr(record, "_fields"):
        for name in record._fields:
            yield FieldDeclaration(name, getattr(record, name))
    else:
        raise TypeError(f"{type(record).__name__} is not a record type")


def _pydantic_tag(extra: Any) -> Optional[str]:
    if isinstance(extra, dict):
        return extra.get(TAG_KEY)
    return None


def dynamo_field(tag: str, default: Any = PydanticUndefined, **kwargs: Any) -> Any:
    """Declare a Pydantic field carrying a marshaling tag.

    Args:
        tag: Tag string (see module docstring)
        default: Field default; required when omitted
        **kwargs: Passed through to pydantic.Field

    Returns:
        FieldInfo usable as a model field default
    """
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[TAG_KEY] = tag
    return Field(default, json_schema_extra=extra, **kwargs)
