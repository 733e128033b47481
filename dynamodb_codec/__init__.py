from .config import DynamoDBConfig
from .exceptions import (
    BatchLimitExceededError,
    ConflictError,
    ConnectionError,
    DuplicateAttributeError,
    DynamoDBCodecError,
    EncodingError,
    IncompatibleTypeError,
    InvalidRecordError,
    MarshalError,
    MarshalInvariantError,
    NotFoundError,
    RetryableError,
    ValidationError,
)
from .models import (
    # Attribute shapes
    AttributeSet,
    AttributeValue,
    WireCategory,
    # Limits
    BATCH_WRITE_ITEM_LIMIT,
    REQUEST_SIZE_LIMIT_BYTES,
    # Enums
    ComparisonOperator,
    KeyType,
    ReturnValues,
    Select,
    UpdateAction,
    # Envelopes
    BatchWriteRequest,
    Condition,
    QueryRequest,
    ScanRequest,
    TableDescription,
)
from .core import (
    # Marshaling engine
    dynamo_field,
    encode_value,
    marshal_attributes,
    # Transport
    DynamoDBTransport,
    Operation,
)
from .handlers.items import (
    # Item CQRS APIs
    ItemReadApi,
    ItemWriteApi,
)
from .handlers.tables import (
    # Table CQRS APIs
    TableReadApi,
    TableWriteApi,
)
from .utils import build_condition, build_key_conditions

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "BatchLimitExceededError",
    "ConflictError",
    "ConnectionError",
    "DuplicateAttributeError",
    "DynamoDBCodecError",
    "EncodingError",
    "IncompatibleTypeError",
    "InvalidRecordError",
    "MarshalError",
    "MarshalInvariantError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",

    # Attribute shapes
    "AttributeSet",
    "AttributeValue",
    "WireCategory",

    # Limits
    "BATCH_WRITE_ITEM_LIMIT",
    "REQUEST_SIZE_LIMIT_BYTES",

    # Enums
    "ComparisonOperator",
    "KeyType",
    "ReturnValues",
    "Select",
    "UpdateAction",

    # Envelopes
    "BatchWriteRequest",
    "Condition",
    "QueryRequest",
    "ScanRequest",
    "TableDescription",

    # Marshaling engine
    "dynamo_field",
    "encode_value",
    "marshal_attributes",
    "build_condition",
    "build_key_conditions",

    # Transport
    "DynamoDBTransport",
    "Operation",

    # CQRS APIs
    "ItemReadApi",
    "ItemWriteApi",
    "TableReadApi",
    "TableWriteApi",
]
