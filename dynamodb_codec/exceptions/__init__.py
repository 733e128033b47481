# Base exception class and the invariant error kept outside the hierarchy
from .base import DynamoDBCodecError, MarshalInvariantError

# Marshal-time exceptions
from .marshal_exceptions import (
    MarshalError,
    InvalidRecordError,
    DuplicateAttributeError,
    EncodingError,
    IncompatibleTypeError,
    BatchLimitExceededError,
)

# Service-side exceptions
from .domain_exceptions import (
    ValidationError,
    NotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
)

__all__ = [
    # Base exception
    "DynamoDBCodecError",
    "MarshalInvariantError",

    # Marshal exceptions
    "BatchLimitExceededError",
    "DuplicateAttributeError",
    "EncodingError",
    "IncompatibleTypeError",
    "InvalidRecordError",
    "MarshalError",

    # Service exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",
]
