"""
Service-Side Exceptions for the DynamoDB codec

These exceptions describe failures reported by DynamoDB itself (or by the
HTTP path to it), after a request envelope has been built and sent. They are
produced by ``map_dynamodb_error`` from the store's error codes.

Organized by category:
1. Request Validation Errors
2. Resource Not Found Errors
3. Conflict and Conditional Errors
4. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import DynamoDBCodecError


# =============================================================================
# Request Validation Errors
# =============================================================================

class ValidationError(DynamoDBCodecError):
    """Raised when a request is rejected as invalid.

    Used for:
    - ValidationException returned by DynamoDB
    - Client-side checks on table names, key types and throughput
    - Request bodies over the size limit
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of parameter-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class NotFoundError(DynamoDBCodecError):
    """Raised when a table or index is not found."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict and Conditional Errors
# =============================================================================

class ConflictError(DynamoDBCodecError):
    """Raised when a conditional write fails or a resource is already in use.

    Used for:
    - ConditionalCheckFailedException
    - ResourceInUseException (e.g. creating a table that exists)
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: Identifier of the conflicting resource (table or key)
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(DynamoDBCodecError):
    """Raised when the store cannot be reached or refuses the caller.

    Used for:
    - Network failures on the HTTP transport
    - Missing or rejected credentials
    - Unknown error codes returned by the service
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize connection error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information (e.g., endpoint, region)
        """
        super().__init__(message, original_error, context)


class RetryableError(DynamoDBCodecError):
    """Raised when the store reports a temporary condition.

    The library performs no retries itself; callers decide.

    Used for:
    - ProvisionedThroughputExceededException
    - ThrottlingException and RequestLimitExceeded
    - InternalServerError and ServiceUnavailable
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
