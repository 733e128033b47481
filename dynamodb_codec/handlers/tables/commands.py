"""
Table Administration Write API

Table lifecycle operations:

- CreateTable with a hash key and optional range key
- UpdateTable to change provisioned throughput
- DeleteTable

Requests are validated locally (name, key types, throughput) before they
are sent, so obviously malformed tables never reach the service.
"""

import logging
from typing import List, Optional

from ...config import DynamoDBConfig
from ...core.transport import DynamoDBTransport, Operation
from ...models import (
    AttributeDefinition,
    CreateTableRequest,
    KeySchemaElement,
    KeyType,
    LocalSecondaryIndex,
    ProvisionedThroughput,
    TableDescription,
    TableDescriptionResponse,
    TableNameRequest,
    UpdateTableRequest,
    WireCategory,
)
from ...utils import validate_key_type, validate_table_name, validate_throughput

logger = logging.getLogger(__name__)


class TableWriteApi:
    """Write-only API for table administration."""

    def __init__(self, config: DynamoDBConfig, transport: Optional[DynamoDBTransport] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.transport = transport or DynamoDBTransport(config)

    def create_table_simple(
        self,
        table_name: str,
        hash_key_name: str,
        hash_key_type: WireCategory,
        read_capacity_units: int,
        write_capacity_units: int,
        range_key_name: Optional[str] = None,
        range_key_type: Optional[WireCategory] = None,
        local_secondary_indexes: Optional[List[LocalSecondaryIndex]] = None
    ) -> TableDescription:
        """
        Create a table keyed on a hash key and an optional range key.

        DynamoDB Operation: CreateTable

        Args:
            table_name: Base table name
            hash_key_name: Hash key attribute name
            hash_key_type: S, N or B
            read_capacity_units: Provisioned reads per second (> 0)
            write_capacity_units: Provisioned writes per second (> 0)
            range_key_name: Optional range key attribute name
            range_key_type: S, N or B; required with range_key_name
            local_secondary_indexes: Optional LSIs (need a range key)

        Returns:
            Description of the table being created (status CREATING)

        Raises:
            ValidationError: Invalid name, key type or throughput
            ConflictError: The table already exists
        """
        full_table_name = validate_table_name(self.config.get_table_name(table_name))
        validate_throughput(read_capacity_units, write_capacity_units)

        definitions = [AttributeDefinition(attribute_name=hash_key_name, attribute_type=validate_key_type(hash_key_type))]
        key_schema = [KeySchemaElement(attribute_name=hash_key_name, key_type=KeyType.HASH)]
        if range_key_name:
            definitions.append(
                AttributeDefinition(attribute_name=range_key_name, attribute_type=validate_key_type(range_key_type))
            )
            key_schema.append(KeySchemaElement(attribute_name=range_key_name, key_type=KeyType.RANGE))

        request = CreateTableRequest(
            table_name=full_table_name,
            attribute_definitions=definitions,
            key_schema=key_schema,
            provisioned_throughput=ProvisionedThroughput(
                read_capacity_units=read_capacity_units,
                write_capacity_units=write_capacity_units
            ),
            local_secondary_indexes=local_secondary_indexes
        )
        payload = self.transport.call(Operation.CREATE_TABLE, request, full_table_name)
        logger.info(f"Created table {full_table_name} ({read_capacity_units} RCU / {write_capacity_units} WCU)")
        return TableDescriptionResponse.from_wire(payload).description

    def change_throughput(self, table_name: str, read_capacity_units: int, write_capacity_units: int) -> TableDescription:
        """
        Change a table's provisioned throughput.

        DynamoDB Operation: UpdateTable
        """
        full_table_name = self.config.get_table_name(table_name)
        validate_throughput(read_capacity_units, write_capacity_units)
        request = UpdateTableRequest(
            table_name=full_table_name,
            provisioned_throughput=ProvisionedThroughput(
                read_capacity_units=read_capacity_units,
                write_capacity_units=write_capacity_units
            )
        )
        payload = self.transport.call(Operation.UPDATE_TABLE, request, full_table_name)
        logger.info(f"Changed throughput of {full_table_name} to {read_capacity_units} RCU / {write_capacity_units} WCU")
        return TableDescriptionResponse.from_wire(payload).description

    def delete_table(self, table_name: str) -> TableDescription:
        """
        Delete a table and all of its items.

        DynamoDB Operation: DeleteTable

        Raises:
            NotFoundError: The table does not exist
        """
        full_table_name = self.config.get_table_name(table_name)
        payload = self.transport.call(Operation.DELETE_TABLE, TableNameRequest(table_name=full_table_name), full_table_name)
        logger.info(f"Deleted table {full_table_name}")
        return TableDescriptionResponse.from_wire(payload).description
