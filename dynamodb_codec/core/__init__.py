"""
Core marshaling engine and transport.

- fields: record introspection and tag resolution
- inference: wire category decisions and emptiness
- scalar / collection: value encoders
- marshal: record -> AttributeSet
- transport: signed HTTP calls and error mapping
"""

from .fields import FieldDeclaration, FieldMetadata, dynamo_field, is_record, iter_fields, resolve_field
from .inference import Kind, check_forced_type, classify, infer_category, is_empty_value
from .scalar import encode_binary, encode_scalar
from .collection import encode_collection
from .marshal import encode_value, marshal_attributes
from .transport import DynamoDBTransport, Operation, map_dynamodb_error

__all__ = [
    "DynamoDBTransport",
    "FieldDeclaration",
    "FieldMetadata",
    "Kind",
    "Operation",
    "check_forced_type",
    "classify",
    "dynamo_field",
    "encode_binary",
    "encode_collection",
    "encode_scalar",
    "encode_value",
    "infer_category",
    "is_empty_value",
    "is_record",
    "iter_fields",
    "map_dynamodb_error",
    "marshal_attributes",
    "resolve_field",
]
