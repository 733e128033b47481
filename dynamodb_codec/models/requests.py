"""
Item Request and Response Envelopes

Wire shapes for the item operations (PutItem, GetItem, UpdateItem,
DeleteItem, Query, Scan) and the batch operations (BatchWriteItem,
BatchGetItem). Items and keys inside these envelopes are AttributeSets
produced by the marshaler; conditions are built by the caller and passed
through unchanged.

Batch envelopes enforce the service's per-request entry limits at
construction time, so an oversized batch never reaches the transport.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, Field, model_validator

from ..exceptions import BatchLimitExceededError
from .attributes import AttributeSet, AttributeValue
from .base import WireModel


BATCH_WRITE_ITEM_LIMIT = 25
BATCH_GET_ITEM_LIMIT = 100
REQUEST_SIZE_LIMIT_BYTES = 1000000


class ComparisonOperator(str, Enum):
    """Condition operators for KeyConditions (query) and ScanFilter (scan)."""
    # Query condition operators
    EQ = "EQ"
    NE = "NE"
    LE = "LE"
    LT = "LT"
    GE = "GE"
    GT = "GT"
    BEGINS_WITH = "BEGINS_WITH"
    BETWEEN = "BETWEEN"

    # Scan condition operators
    CONTAINS = "CONTAINS"
    NOT_CONTAINS = "NOT_CONTAINS"
    NOT_NULL = "NOT_NULL"
    NULL = "NULL"
    IN = "IN"


class Select(str, Enum):
    """Which attributes a Query or Scan returns."""
    ALL_ATTRIBUTES = "ALL_ATTRIBUTES"
    ALL_PROJECTED_ATTRIBUTES = "ALL_PROJECTED_ATTRIBUTES"
    SPECIFIC_ATTRIBUTES = "SPECIFIC_ATTRIBUTES"
    COUNT = "COUNT"


class ReturnConsumedCapacity(str, Enum):
    TOTAL = "TOTAL"
    NONE = "NONE"


class ReturnValues(str, Enum):
    NONE = "NONE"
    ALL_OLD = "ALL_OLD"
    UPDATED_OLD = "UPDATED_OLD"
    ALL_NEW = "ALL_NEW"
    UPDATED_NEW = "UPDATED_NEW"


class UpdateAction(str, Enum):
    """Per-attribute action of an UpdateItem request."""
    PUT = "PUT"
    DELETE = "DELETE"
    ADD = "ADD"


# =============================================================================
# Conditions
# =============================================================================

class Condition(WireModel):
    """A caller-built comparison, passed through to the service as-is."""
    comparison_operator: ComparisonOperator
    attribute_value_list: Optional[List[AttributeValue]] = None


# =============================================================================
# Single-Item Requests
# =============================================================================

class PutItemRequest(WireModel):
    table_name: str
    item: AttributeSet
    return_values: Optional[ReturnValues] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None
    return_item_collection_metrics: Optional[str] = None


class GetItemRequest(WireModel):
    table_name: str
    key: AttributeSet
    attributes_to_get: Optional[List[str]] = None
    consistent_read: Optional[bool] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None


class AttributeValueUpdate(WireModel):
    action: UpdateAction = UpdateAction.PUT
    value: Optional[AttributeValue] = None


class UpdateItemRequest(WireModel):
    table_name: str
    key: AttributeSet
    attribute_updates: Dict[str, AttributeValueUpdate]
    return_values: Optional[ReturnValues] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None


class DeleteItemRequest(WireModel):
    table_name: str
    key: AttributeSet
    return_values: Optional[ReturnValues] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None


class QueryRequest(WireModel):
    """
    Query envelope.

    ``scan_index_forward`` is True (ascending) when omitted by the service's
    own default.
    """
    table_name: str
    key_conditions: Dict[str, Condition]
    index_name: Optional[str] = None
    attributes_to_get: Optional[List[str]] = None
    consistent_read: Optional[bool] = None
    select: Optional[Select] = None
    scan_index_forward: Optional[bool] = None
    exclusive_start_key: Optional[AttributeSet] = None
    limit: Optional[int] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None


class ScanRequest(WireModel):
    table_name: str
    scan_filter: Optional[Dict[str, Condition]] = None
    index_name: Optional[str] = None
    attributes_to_get: Optional[List[str]] = None
    select: Optional[Select] = None
    exclusive_start_key: Optional[AttributeSet] = None
    limit: Optional[int] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None


# =============================================================================
# Batch Requests
# =============================================================================

class PutRequest(WireModel):
    item: AttributeSet


class DeleteRequest(WireModel):
    key: AttributeSet


class WriteRequest(WireModel):
    """One entry of a BatchWriteItem request: a put or a delete, never both."""
    put_request: Optional[PutRequest] = None
    delete_request: Optional[DeleteRequest] = None

    @model_validator(mode='after')
    def check_single_request(self):
        if (self.put_request is None) == (self.delete_request is None):
            raise ValueError("WriteRequest must hold exactly one of PutRequest or DeleteRequest")
        return self


class BatchWriteRequest(WireModel):
    request_items: Dict[str, List[WriteRequest]]
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None
    return_item_collection_metrics: Optional[str] = None

    @model_validator(mode='after')
    def check_item_limit(self):
        count = sum(len(requests) for requests in self.request_items.values())
        if count > BATCH_WRITE_ITEM_LIMIT:
            raise BatchLimitExceededError("BatchWriteItem", count, BATCH_WRITE_ITEM_LIMIT)
        return self

    @classmethod
    def for_table(
        cls,
        table_name: str,
        puts: Optional[List[AttributeSet]] = None,
        deletes: Optional[List[AttributeSet]] = None,
        **kwargs
    ) -> "BatchWriteRequest":
        """
        Build a single-table batch from marshaled items and keys.

        Puts come first, then deletes, each group in the given order.

        Raises:
            BatchLimitExceededError: More than BATCH_WRITE_ITEM_LIMIT entries
        """
        puts = list(puts or [])
        deletes = list(deletes or [])
        count = len(puts) + len(deletes)
        if count > BATCH_WRITE_ITEM_LIMIT:
            raise BatchLimitExceededError("BatchWriteItem", count, BATCH_WRITE_ITEM_LIMIT)

        requests = [WriteRequest(put_request=PutRequest(item=item)) for item in puts]
        requests += [WriteRequest(delete_request=DeleteRequest(key=key)) for key in deletes]
        return cls(request_items={table_name: requests}, **kwargs)


class KeysAndAttributes(WireModel):
    keys: List[AttributeSet]
    attributes_to_get: Optional[List[str]] = None
    consistent_read: Optional[bool] = None


class BatchGetRequest(WireModel):
    request_items: Dict[str, KeysAndAttributes]
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = None

    @model_validator(mode='after')
    def check_key_limit(self):
        count = sum(len(entry.keys) for entry in self.request_items.values())
        if count > BATCH_GET_ITEM_LIMIT:
            raise BatchLimitExceededError("BatchGetItem", count, BATCH_GET_ITEM_LIMIT)
        return self


# =============================================================================
# Responses
# =============================================================================

class ConsumedCapacity(WireModel):
    table_name: Optional[str] = None
    capacity_units: Optional[float] = None


class PutItemResponse(WireModel):
    attributes: Optional[AttributeSet] = None
    consumed_capacity: Optional[ConsumedCapacity] = None


class GetItemResponse(WireModel):
    item: Optional[AttributeSet] = None
    consumed_capacity: Optional[ConsumedCapacity] = None


class UpdateItemResponse(WireModel):
    attributes: Optional[AttributeSet] = None
    consumed_capacity: Optional[ConsumedCapacity] = None


class DeleteItemResponse(WireModel):
    attributes: Optional[AttributeSet] = None
    consumed_capacity: Optional[ConsumedCapacity] = None


class QueryResponse(WireModel):
    items: List[AttributeSet] = Field(default_factory=list)
    count: Optional[int] = None
    scanned_count: Optional[int] = None
    last_evaluated_key: Optional[AttributeSet] = None
    consumed_capacity: Optional[ConsumedCapacity] = None


class ScanResponse(QueryResponse):
    pass


class BatchWriteResponse(WireModel):
    unprocessed_items: Dict[str, List[WriteRequest]] = Field(default_factory=dict)
    consumed_capacity: Optional[List[ConsumedCapacity]] = None


class BatchGetResponse(WireModel):
    responses: Dict[str, List[AttributeSet]] = Field(default_factory=dict)
    unprocessed_keys: Dict[str, KeysAndAttributes] = Field(default_factory=dict)
    consumed_capacity: Optional[List[ConsumedCapacity]] = None


class ErrorResponse(WireModel):
    """Error body returned with a non-200 status."""
    error_type: str = Field("", alias="__type")
    message: str = Field("", validation_alias=AliasChoices("message", "Message"), serialization_alias="message")

    @property
    def code(self) -> str:
        """Error code without the service namespace prefix."""
        return self.error_type.rsplit('#', 1)[-1]
