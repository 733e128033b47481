"""
Marshaling Exceptions

Errors raised while turning a caller's record into a DynamoDB attribute set,
or while assembling request envelopes from such attribute sets.

Organized by category:
1. Input Shape Errors
2. Attribute Naming Errors
3. Encoding Errors
4. Capacity Errors
"""

from typing import Any, Optional

from .base import DynamoDBCodecError


class MarshalError(DynamoDBCodecError):
    """Base class for every failure of a marshal call."""


# =============================================================================
# Input Shape Errors
# =============================================================================

class InvalidRecordError(MarshalError):
    """Raised when the value handed to the marshaler is not a structured record.

    Used for:
    - None passed where a record was required
    - Top-level dicts, lists, scalars and other non-record values
    """

    def __init__(self, message: str, value_type: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize invalid record error.

        Args:
            message: Human-readable error message
            value_type: Name of the type that was received
            original_error: The original exception that caused this error
        """
        self.value_type = value_type
        context = {}
        if value_type:
            context['value_type'] = value_type
        super().__init__(message, original_error, context)


# =============================================================================
# Attribute Naming Errors
# =============================================================================

class DuplicateAttributeError(MarshalError):
    """Raised when two fields of one record resolve to the same wire name."""

    def __init__(self, attribute_name: str, field_name: Optional[str] = None):
        """Initialize duplicate attribute error.

        Args:
            attribute_name: The wire attribute name claimed twice
            field_name: Declared name of the second field claiming it
        """
        self.attribute_name = attribute_name
        self.field_name = field_name
        message = f"Multiple attributes have same designated name '{attribute_name}'"
        context = {'attribute_name': attribute_name}
        if field_name:
            context['field_name'] = field_name
        super().__init__(message, None, context)


# =============================================================================
# Encoding Errors
# =============================================================================

class EncodingError(MarshalError):
    """Raised when a value cannot be represented in any wire category.

    Used for:
    - Unsupported Python types
    - Opaque JSON serialization failures
    - Non-finite numbers
    - Collections whose element kind maps to no set category
    """

    def __init__(self, message: str, field_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize encoding error.

        Args:
            message: Human-readable error message
            field_name: Declared name of the field being encoded, when known
            original_error: The original exception that caused this error
        """
        self.field_name = field_name
        context = {}
        if field_name:
            context['field_name'] = field_name
        super().__init__(message, original_error, context)

    def attach_field(self, field_name: str) -> "EncodingError":
        """Record the field being encoded, keeping the innermost one if already set."""
        if self.field_name is None:
            self.field_name = field_name
            self.context['field_name'] = field_name
        return self


class IncompatibleTypeError(EncodingError):
    """Raised when a forced wire type does not fit the shape of the value."""

    def __init__(self, wire_type: str, value: Any, field_name: Optional[str] = None):
        """Initialize incompatible type error.

        Args:
            wire_type: The forced wire category token (e.g. 'NS')
            value: The value the category was forced onto
            field_name: Declared name of the field, when known
        """
        self.wire_type = wire_type
        self.value_type = type(value).__name__
        message = f"Value of type {self.value_type} cannot be stored as forced type '{wire_type}'"
        super().__init__(message, field_name)
        self.context['wire_type'] = wire_type


# =============================================================================
# Capacity Errors
# =============================================================================

class BatchLimitExceededError(DynamoDBCodecError):
    """Raised when a batch request holds more entries than DynamoDB accepts."""

    def __init__(self, operation: str, item_count: int, limit: int):
        """Initialize batch limit error.

        Args:
            operation: The batch operation (e.g. 'BatchWriteItem')
            item_count: Number of entries in the rejected batch
            limit: Maximum number of entries allowed
        """
        self.operation = operation
        self.item_count = item_count
        self.limit = limit
        message = f"Maximum of {limit} item limit for {operation} exceeded"
        context = {'operation': operation, 'item_count': item_count, 'limit': limit}
        super().__init__(message, None, context)
