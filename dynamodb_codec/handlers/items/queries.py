"""
Item Read API

Read operations on table items:

- GetItem by primary key
- Query with caller-built KeyConditions (see utils.build_key_conditions)
- Scan with an optional caller-built ScanFilter
- BatchGetItem for up to 100 keys

Returned items are attribute sets; decoding them into records is left to
the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from ...config import DynamoDBConfig
from ...core.transport import DynamoDBTransport, Operation
from ...exceptions import ValidationError
from ...models import (
    AttributeSet,
    BatchGetRequest,
    BatchGetResponse,
    Condition,
    GetItemRequest,
    GetItemResponse,
    KeysAndAttributes,
    QueryRequest,
    QueryResponse,
    ScanRequest,
    ScanResponse,
)
from ...utils import key_identifier, resolve_attributes

logger = logging.getLogger(__name__)


class ItemReadApi:
    """
    Read-only API for item lookups.

    Query and Scan results carry ``last_evaluated_key``; pass it back as
    ``exclusive_start_key`` to fetch the next page.
    """

    def __init__(self, config: DynamoDBConfig, transport: Optional[DynamoDBTransport] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.transport = transport or DynamoDBTransport(config)

    def get_item(
        self,
        table_name: str,
        key: Any,
        attributes_to_get: Optional[List[str]] = None,
        consistent_read: Optional[bool] = None
    ) -> Optional[AttributeSet]:
        """
        Fetch one item by primary key.

        DynamoDB Operation: GetItem

        Args:
            table_name: Base table name
            key: Record or attribute set holding the key attributes
            attributes_to_get: Attribute names to return (all if None)
            consistent_read: Strongly consistent read when True

        Returns:
            The item's attribute set, or None if no item has this key
        """
        full_table_name = self.config.get_table_name(table_name)
        key_attributes = resolve_attributes(key)
        if not key_attributes:
            raise ValidationError(f"Key for {full_table_name} has no attributes")

        request = GetItemRequest(
            table_name=full_table_name,
            key=key_attributes,
            attributes_to_get=attributes_to_get,
            consistent_read=consistent_read
        )
        payload = self.transport.call(Operation.GET_ITEM, request, full_table_name, key_identifier(key_attributes))
        return GetItemResponse.from_wire(payload).item

    def query(
        self,
        table_name: str,
        key_conditions: Dict[str, Condition],
        **options: Any
    ) -> QueryResponse:
        """
        Query items by key conditions.

        DynamoDB Operation: Query

        Args:
            table_name: Base table name
            key_conditions: Attribute name -> Condition, passed through unchanged
            **options: Other QueryRequest fields (index_name, limit, select,
                scan_index_forward, exclusive_start_key, ...)

        Returns:
            QueryResponse with items and pagination key
        """
        if not key_conditions:
            raise ValidationError("Query requires at least one key condition")
        full_table_name = self.config.get_table_name(table_name)
        request = QueryRequest(table_name=full_table_name, key_conditions=key_conditions, **options)
        return self.raw_query(request)

    def raw_query(self, request: QueryRequest) -> QueryResponse:
        """Send a fully built QueryRequest as-is (no table name expansion)."""
        payload = self.transport.call(Operation.QUERY, request, request.table_name)
        response = QueryResponse.from_wire(payload)
        logger.debug(f"Query on {request.table_name} returned {len(response.items)} items")
        return response

    def scan(
        self,
        table_name: str,
        scan_filter: Optional[Dict[str, Condition]] = None,
        **options: Any
    ) -> ScanResponse:
        """
        Scan a table, optionally filtered.

        DynamoDB Operation: Scan

        Scans read the whole table; set ``limit`` and page with
        ``exclusive_start_key``.

        Args:
            table_name: Base table name
            scan_filter: Attribute name -> Condition, passed through unchanged
            **options: Other ScanRequest fields

        Returns:
            ScanResponse with items and pagination key
        """
        full_table_name = self.config.get_table_name(table_name)
        if 'limit' not in options:
            logger.warning(f"Scan on {full_table_name} without limit - consider adding one")
        request = ScanRequest(table_name=full_table_name, scan_filter=scan_filter, **options)
        payload = self.transport.call(Operation.SCAN, request, full_table_name)
        return ScanResponse.from_wire(payload)

    def batch_get(
        self,
        table_name: str,
        keys: List[Any],
        attributes_to_get: Optional[List[str]] = None,
        consistent_read: Optional[bool] = None
    ) -> BatchGetResponse:
        """
        Fetch up to 100 items by key in one request.

        DynamoDB Operation: BatchGetItem

        Args:
            table_name: Base table name
            keys: Records or attribute sets holding key attributes
            attributes_to_get: Attribute names to return (all if None)
            consistent_read: Strongly consistent reads when True

        Returns:
            BatchGetResponse; ``responses`` is keyed by full table name and
            ``unprocessed_keys`` holds keys the service did not get to

        Raises:
            BatchLimitExceededError: More than 100 keys
        """
        if not keys:
            raise ValidationError("Batch get requires at least one key")
        full_table_name = self.config.get_table_name(table_name)
        request = BatchGetRequest(
            request_items={
                full_table_name: KeysAndAttributes(
                    keys=[resolve_attributes(key) for key in keys],
                    attributes_to_get=attributes_to_get,
                    consistent_read=consistent_read
                )
            }
        )
        payload = self.transport.call(Operation.BATCH_GET_ITEM, request, full_table_name)
        response = BatchGetResponse.from_wire(payload)

        unprocessed = response.unprocessed_keys.get(full_table_name)
        if unprocessed and unprocessed.keys:
            logger.warning(f"Batch get on {full_table_name} left {len(unprocessed.keys)} keys unprocessed")
        return response
