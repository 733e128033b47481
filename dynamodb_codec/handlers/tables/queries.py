"""
Table Administration Read API

DescribeTable and ListTables. ListTables pages at most 100 names per call;
follow ``last_evaluated_table_name`` for more.
"""

import logging
from typing import List, Optional, Tuple

from ...config import DynamoDBConfig
from ...core.transport import DynamoDBTransport, Operation
from ...exceptions import ValidationError
from ...models import (
    LIST_TABLES_MAX_LIMIT,
    ListTablesRequest,
    ListTablesResponse,
    TableDescription,
    TableDescriptionResponse,
    TableNameRequest,
)

logger = logging.getLogger(__name__)


class TableReadApi:
    """Read-only API for table metadata."""

    def __init__(self, config: DynamoDBConfig, transport: Optional[DynamoDBTransport] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.transport = transport or DynamoDBTransport(config)

    def describe_table(self, table_name: str) -> TableDescription:
        """
        Fetch a table's description.

        DynamoDB Operation: DescribeTable

        Raises:
            NotFoundError: The table does not exist
        """
        full_table_name = self.config.get_table_name(table_name)
        payload = self.transport.call(
            Operation.DESCRIBE_TABLE, TableNameRequest(table_name=full_table_name), full_table_name
        )
        return TableDescriptionResponse.from_wire(payload).description

    def list_tables(
        self,
        start_table_name: Optional[str] = None,
        limit: Optional[int] = None
    ) -> Tuple[List[str], Optional[str]]:
        """
        List table names.

        DynamoDB Operation: ListTables

        Args:
            start_table_name: Resume after this name (from a previous call)
            limit: Page size, 1..100

        Returns:
            Tuple of (table_names, last_evaluated_table_name)
        """
        if limit is not None and not 1 <= limit <= LIST_TABLES_MAX_LIMIT:
            raise ValidationError(
                f"ListTables limit must be between 1 and {LIST_TABLES_MAX_LIMIT}",
                {'limit': limit}
            )
        request = ListTablesRequest(exclusive_start_table_name=start_table_name, limit=limit)
        response = ListTablesResponse.from_wire(self.transport.call(Operation.LIST_TABLES, request))
        logger.debug(f"ListTables returned {len(response.table_names)} names")
        return response.table_names, response.last_evaluated_table_name
