"""
Item Write API

Write operations on table items. Records are marshaled into attribute sets
here, wrapped in request envelopes and sent through the transport:

- PutItem: store a whole record
- UpdateItem: apply per-attribute PUT/ADD/DELETE actions to one item
- DeleteItem: remove one item by key
- BatchWriteItem: up to 25 puts and deletes in one request

Table names are expanded with the configured prefix and environment.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ...config import DynamoDBConfig
from ...core.transport import DynamoDBTransport, Operation
from ...exceptions import BatchLimitExceededError, ValidationError
from ...models import (
    BATCH_WRITE_ITEM_LIMIT,
    AttributeValueUpdate,
    BatchWriteRequest,
    BatchWriteResponse,
    DeleteItemRequest,
    DeleteItemResponse,
    PutItemRequest,
    PutItemResponse,
    ReturnValues,
    UpdateAction,
    UpdateItemRequest,
    UpdateItemResponse,
)
from ...utils import key_identifier, resolve_attributes

logger = logging.getLogger(__name__)

MAX_KEY_ATTRIBUTES = 2


class ItemWriteApi:
    """
    Write-only API for item mutations.

    Items and keys are accepted as records (Pydantic models, dataclasses,
    NamedTuples) or as ready-made attribute sets.
    """

    def __init__(self, config: DynamoDBConfig, transport: Optional[DynamoDBTransport] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.transport = transport or DynamoDBTransport(config)

    def put_item(
        self,
        table_name: str,
        item: Any,
        return_values: Optional[ReturnValues] = None
    ) -> PutItemResponse:
        """
        Store a record as one item, replacing any item with the same key.

        DynamoDB Operation: PutItem

        Args:
            table_name: Base table name
            item: Record to store
            return_values: NONE or ALL_OLD

        Returns:
            PutItemResponse (old attributes when requested)

        Raises:
            MarshalError: The record cannot be marshaled
            ValidationError: The item is empty or rejected by the service
        """
        full_table_name = self.config.get_table_name(table_name)
        attributes = resolve_attributes(item)
        if not attributes:
            raise ValidationError(f"Item for {full_table_name} has no storable attributes")

        request = PutItemRequest(table_name=full_table_name, item=attributes, return_values=return_values)
        payload = self.transport.call(Operation.PUT_ITEM, request, full_table_name)
        logger.info(f"Put item in {full_table_name}: {sorted(attributes)}")
        return PutItemResponse.from_wire(payload)

    def update_item(
        self,
        table_name: str,
        key: Any,
        updates: Any,
        action: UpdateAction = UpdateAction.PUT,
        remove: Optional[Iterable[str]] = None,
        return_values: Optional[ReturnValues] = None
    ) -> UpdateItemResponse:
        """
        Apply attribute updates to the item addressed by ``key``.

        DynamoDB Operation: UpdateItem with AttributeUpdates

        Every attribute of ``updates`` gets ``action``; attributes that are
        part of the key are left out. Names in ``remove`` are deleted.

        Args:
            table_name: Base table name
            key: Record holding the hash key and, optionally, the range key
            updates: Record whose attributes are applied
            action: PUT (overwrite), ADD (increment numbers / extend sets) or DELETE
            remove: Attribute names to delete outright
            return_values: Which attributes to return

        Returns:
            UpdateItemResponse

        Raises:
            ValidationError: Key has more than two attributes, or nothing to update
            MarshalError: Key or updates cannot be marshaled
        """
        full_table_name = self.config.get_table_name(table_name)
        key_attributes = resolve_attributes(key)
        if not key_attributes or len(key_attributes) > MAX_KEY_ATTRIBUTES:
            raise ValidationError(
                f"Key contains {len(key_attributes)} attributes, should only contain hash key and range key",
                {'key_attributes': sorted(key_attributes)}
            )

        attribute_updates: Dict[str, AttributeValueUpdate] = {}
        for name, value in resolve_attributes(updates).items():
            if name not in key_attributes:
                attribute_updates[name] = AttributeValueUpdate(action=action, value=value)
        for name in remove or ():
            if name not in key_attributes:
                attribute_updates[name] = AttributeValueUpdate(action=UpdateAction.DELETE)

        if not attribute_updates:
            raise ValidationError(f"No attributes to update in {full_table_name}")

        resource_id = key_identifier(key_attributes)
        request = UpdateItemRequest(
            table_name=full_table_name,
            key=key_attributes,
            attribute_updates=attribute_updates,
            return_values=return_values
        )
        payload = self.transport.call(Operation.UPDATE_ITEM, request, full_table_name, resource_id)
        logger.info(f"Updated item {resource_id} in {full_table_name}: {sorted(attribute_updates)}")
        return UpdateItemResponse.from_wire(payload)

    def delete_item(
        self,
        table_name: str,
        key: Any,
        return_values: Optional[ReturnValues] = None
    ) -> DeleteItemResponse:
        """
        Delete the item addressed by ``key``.

        DynamoDB Operation: DeleteItem

        Args:
            table_name: Base table name
            key: Record holding the item's key attributes
            return_values: NONE or ALL_OLD

        Returns:
            DeleteItemResponse
        """
        full_table_name = self.config.get_table_name(table_name)
        key_attributes = resolve_attributes(key)
        if not key_attributes:
            raise ValidationError(f"Key for {full_table_name} has no attributes")

        resource_id = key_identifier(key_attributes)
        request = DeleteItemRequest(table_name=full_table_name, key=key_attributes, return_values=return_values)
        payload = self.transport.call(Operation.DELETE_ITEM, request, full_table_name, resource_id)
        logger.info(f"Deleted item {resource_id} from {full_table_name}")
        return DeleteItemResponse.from_wire(payload)

    def batch_write(
        self,
        table_name: str,
        items: Optional[List[Any]] = None,
        delete_keys: Optional[List[Any]] = None
    ) -> BatchWriteResponse:
        """
        Put and delete up to 25 items in one request.

        DynamoDB Operation: BatchWriteItem

        The entry count is checked before any record is marshaled, so an
        oversized batch never reaches the service. Unprocessed entries are
        returned to the caller; no retry is attempted.

        Args:
            table_name: Base table name
            items: Records to put
            delete_keys: Keys of items to delete

        Returns:
            BatchWriteResponse with any UnprocessedItems

        Raises:
            BatchLimitExceededError: More than 25 entries
            ValidationError: Nothing to write
        """
        full_table_name = self.config.get_table_name(table_name)
        items = list(items or [])
        delete_keys = list(delete_keys or [])
        count = len(items) + len(delete_keys)
        if count > BATCH_WRITE_ITEM_LIMIT:
            logger.error(f"Batch write of {count} entries to {full_table_name} exceeds {BATCH_WRITE_ITEM_LIMIT}")
            raise BatchLimitExceededError(Operation.BATCH_WRITE_ITEM.value, count, BATCH_WRITE_ITEM_LIMIT)
        if not count:
            raise ValidationError(f"Batch write to {full_table_name} has no entries")

        request = BatchWriteRequest.for_table(
            full_table_name,
            puts=[resolve_attributes(item) for item in items],
            deletes=[resolve_attributes(key) for key in delete_keys],
        )
        payload = self.transport.call(Operation.BATCH_WRITE_ITEM, request, full_table_name)
        response = BatchWriteResponse.from_wire(payload)

        unprocessed = sum(len(entries) for entries in response.unprocessed_items.values())
        if unprocessed:
            logger.warning(f"Batch write to {full_table_name} left {unprocessed} of {count} entries unprocessed")
        logger.info(f"Batch wrote {count - unprocessed} entries to {full_table_name}")
        return response
