"""
DynamoDB HTTP Transport

Sends request envelopes to DynamoDB's JSON API and maps failures to the
library's exceptions. The read/write APIs build envelopes and hand them to
``DynamoDBTransport.call``; nothing else talks to the network.

Every call is a single signed POST:

- URL: ``config.endpoint``
- ``Content-Type: application/x-amz-json-1.0``
- ``X-Amz-Target: DynamoDB_20120810.<Operation>``
- body: the envelope's JSON wire form
- AWS Signature Version 4, credentials resolved through boto3

No retries are performed; throttling surfaces as RetryableError.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, Optional

import boto3
import requests
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError, ClientError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)
from ..models.base import WireModel
from ..models.requests import REQUEST_SIZE_LIMIT_BYTES, ErrorResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "dynamodb"
TARGET_PREFIX = "DynamoDB_20120810."
CONTENT_TYPE = "application/x-amz-json-1.0"


class Operation(str, Enum):
    """DynamoDB API actions, as sent in X-Amz-Target."""
    PUT_ITEM = "PutItem"
    GET_ITEM = "GetItem"
    UPDATE_ITEM = "UpdateItem"
    DELETE_ITEM = "DeleteItem"
    QUERY = "Query"
    SCAN = "Scan"
    BATCH_WRITE_ITEM = "BatchWriteItem"
    BATCH_GET_ITEM = "BatchGetItem"
    CREATE_TABLE = "CreateTable"
    DESCRIBE_TABLE = "DescribeTable"
    UPDATE_TABLE = "UpdateTable"
    DELETE_TABLE = "DeleteTable"
    LIST_TABLES = "ListTables"

    @property
    def target(self) -> str:
        return f"{TARGET_PREFIX}{self.value}"


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: Optional[str] = None,
    resource_id: Optional[str] = None
) -> Exception:
    """Map a DynamoDB error response to a library exception.

    Args:
        error: ClientError carrying the service's error code and message
        operation: The operation that failed (e.g., "GetItem", "PutItem")
        table_name: The DynamoDB table name, when the operation has one
        resource_id: Optional resource identifier for context

    Returns:
        Appropriate library exception
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    context = f"{operation} on {table_name}" if table_name else operation
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code == 'ResourceNotFoundException':
        return NotFoundError(f"Table not found - {full_message}", 'table', table_name, original_error=error)

    elif error_code in ['ValidationException', 'SerializationException']:
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'ItemCollectionSizeLimitExceededException':
        return ValidationError(f"Item collection size limit exceeded - {full_message}", original_error=error)

    elif error_code == 'LimitExceededException':
        return ValidationError(f"DynamoDB limit exceeded - {full_message}", original_error=error)

    elif error_code == 'ResourceInUseException':
        return ConflictError(f"Resource in use - {full_message}", resource_id or table_name, original_error=error)

    elif error_code in ['ProvisionedThroughputExceededException', 'RequestLimitExceeded', 'ThrottlingException']:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in ['InternalServerError', 'InternalFailure', 'ServiceUnavailable', 'ServiceUnavailableException']:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in [
        'UnrecognizedClientException', 'AccessDeniedException', 'MissingAuthenticationTokenException',
        'IncompleteSignatureException', 'InvalidSignatureException'
    ]:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    elif error_code in ['ExpiredTokenException', 'TokenRefreshRequiredException']:
        return ConnectionError(f"Token expired - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


class DynamoDBTransport:
    """
    Signed JSON-over-HTTP client for DynamoDB.

    The boto3 session (used only to resolve credentials) and the HTTP
    session are created lazily on first use.
    """

    def __init__(self, config: DynamoDBConfig, http_session: Optional[requests.Session] = None):
        """Initialize the transport.

        Args:
            config: DynamoDB configuration
            http_session: Optional preconfigured requests session
        """
        self.config = config
        self._http = http_session
        self._session = None

    @property
    def session(self) -> boto3.Session:
        """Lazy initialization of the boto3 session."""
        if self._session is None:
            try:
                self._session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    aws_session_token=self.config.aws_session_token,
                    region_name=self.config.region_name
                )
            except BotoCoreError as e:
                logger.error(f"Failed to create AWS session: {e}")
                raise ConnectionError(f"Failed to create AWS session: {e}", e) from e
        return self._session

    @property
    def http(self) -> requests.Session:
        """Lazy initialization of the HTTP session."""
        if self._http is None:
            self._http = requests.Session()
        return self._http

    def credentials(self):
        """Resolve a frozen set of AWS credentials.

        Raises:
            ConnectionError: If no credentials can be found
        """
        credentials = self.session.get_credentials()
        if credentials is None:
            logger.error("No AWS credentials found for DynamoDB request signing")
            raise ConnectionError(
                "No AWS credentials found",
                context={'region': self.config.region_name}
            )
        return credentials.get_frozen_credentials()

    def sign(self, operation: Operation, body: str) -> Dict[str, str]:
        """Build the signed header set for one request."""
        request = AWSRequest(
            method="POST",
            url=self.config.endpoint,
            data=body.encode('utf-8'),
            headers={
                'Content-Type': CONTENT_TYPE,
                'X-Amz-Target': operation.target,
            }
        )
        SigV4Auth(self.credentials(), SERVICE_NAME, self.config.region_name).add_auth(request)
        return dict(request.headers.items())

    def call(
        self,
        operation: Operation,
        envelope: WireModel,
        table_name: Optional[str] = None,
        resource_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Send one request and return the decoded response body.

        Args:
            operation: The DynamoDB action
            envelope: Request envelope
            table_name: Table addressed by the request, for error context
            resource_id: Optional resource identifier, for error context

        Returns:
            Decoded JSON response body

        Raises:
            ValidationError: Request body over the size limit, or rejected by the service
            ConnectionError: Network failure, missing credentials, unknown service error
            NotFoundError / ConflictError / RetryableError: Mapped service errors
        """
        body = json.dumps(envelope.to_wire())
        size = len(body.encode('utf-8'))
        if size > REQUEST_SIZE_LIMIT_BYTES:
            logger.error(f"{operation.value} request of {size} bytes exceeds {REQUEST_SIZE_LIMIT_BYTES} bytes")
            raise ValidationError(
                f"Request body of {size} bytes exceeds the limit of {REQUEST_SIZE_LIMIT_BYTES} bytes",
                {'size': size, 'limit': REQUEST_SIZE_LIMIT_BYTES}
            )

        if self.config.enable_debug_logging:
            logger.debug(f"{operation.value} request: {body}")

        headers = self.sign(operation, body)
        try:
            response = self.http.post(
                self.config.endpoint,
                data=body.encode('utf-8'),
                headers=headers,
                timeout=self.config.timeout_seconds
            )
        except requests.RequestException as e:
            logger.error(f"{operation.value} request to {self.config.endpoint} failed: {e}")
            raise ConnectionError(
                f"Failed to reach DynamoDB: {e}", e,
                {'endpoint': self.config.endpoint, 'operation': operation.value}
            ) from e

        if response.status_code != 200:
            error = self._client_error(operation, response)
            logger.error(f"{operation.value} failed with HTTP {response.status_code}: {error}")
            raise map_dynamodb_error(error, operation.value, table_name, resource_id) from error

        if self.config.enable_debug_logging:
            logger.debug(f"{operation.value} response: {response.text}")

        try:
            return response.json() if response.content else {}
        except ValueError as e:
            logger.error(f"{operation.value} returned an invalid JSON body: {e}")
            raise ConnectionError(f"Invalid response body from DynamoDB: {e}", e) from e

    @staticmethod
    def _client_error(operation: Operation, response: requests.Response) -> ClientError:
        """Convert an error response into a botocore ClientError."""
        try:
            parsed = ErrorResponse.from_wire(response.json())
            code = parsed.code or f"HTTP{response.status_code}"
            message = parsed.message or response.reason or ""
        except (ValueError, ValidationError):
            code = f"HTTP{response.status_code}"
            message = response.text or response.reason or ""
        return ClientError(
            {
                'Error': {'Code': code, 'Message': message},
                'ResponseMetadata': {'HTTPStatusCode': response.status_code},
            },
            operation.value
        )
