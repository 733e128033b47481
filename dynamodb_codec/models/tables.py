"""
Table Administration Models

Wire shapes for CreateTable, DescribeTable, UpdateTable, DeleteTable and
ListTables. These operations do not go through the attribute marshaler; the
shapes only reference attribute types by their wire token.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .attributes import WireCategory
from .base import WireModel


MIN_TABLE_NAME_LENGTH = 3
MAX_TABLE_NAME_LENGTH = 255
LIST_TABLES_MAX_LIMIT = 100


class KeyType(str, Enum):
    """Role of an attribute in the primary key."""
    HASH = "HASH"
    RANGE = "RANGE"


class ProjectionType(str, Enum):
    """Attributes copied into a secondary index."""
    ALL = "ALL"
    KEYS_ONLY = "KEYS_ONLY"
    INCLUDE = "INCLUDE"


class TableStatus(str, Enum):
    """Lifecycle state reported by DescribeTable."""
    CREATING = "CREATING"
    UPDATING = "UPDATING"
    DELETING = "DELETING"
    ACTIVE = "ACTIVE"


# =============================================================================
# Table Attributes
# =============================================================================

class AttributeDefinition(WireModel):
    """Declared type of a key attribute."""
    attribute_name: str
    attribute_type: WireCategory


class KeySchemaElement(WireModel):
    """One element of a table or index key schema."""
    attribute_name: str
    key_type: KeyType


class Projection(WireModel):
    projection_type: ProjectionType = ProjectionType.ALL
    non_key_attributes: Optional[List[str]] = None


class LocalSecondaryIndex(WireModel):
    index_name: str
    key_schema: List[KeySchemaElement]
    projection: Projection = Field(default_factory=Projection)


class ProvisionedThroughput(WireModel):
    """
    Read/write capacity of a table.

    The date-time members are only present in DescribeTable responses and are
    expressed in unix seconds (the service may send scientific notation).
    """
    read_capacity_units: int
    write_capacity_units: int
    last_decrease_date_time: Optional[float] = None
    last_increase_date_time: Optional[float] = None
    number_of_decreases_today: Optional[int] = None


class TableDescription(WireModel):
    """Table metadata as returned by the service."""
    table_name: Optional[str] = None
    table_status: Optional[str] = None
    attribute_definitions: List[AttributeDefinition] = Field(default_factory=list)
    key_schema: List[KeySchemaElement] = Field(default_factory=list)
    local_secondary_indexes: Optional[List[LocalSecondaryIndex]] = None
    provisioned_throughput: Optional[ProvisionedThroughput] = None
    creation_date_time: Optional[float] = None
    item_count: Optional[int] = None
    table_size_bytes: Optional[int] = None


# =============================================================================
# Requests
# =============================================================================

class CreateTableRequest(WireModel):
    table_name: str
    attribute_definitions: List[AttributeDefinition]
    key_schema: List[KeySchemaElement]
    provisioned_throughput: ProvisionedThroughput
    local_secondary_indexes: Optional[List[LocalSecondaryIndex]] = None


class UpdateTableRequest(WireModel):
    table_name: str
    provisioned_throughput: ProvisionedThroughput


class TableNameRequest(WireModel):
    """Body of DescribeTable and DeleteTable."""
    table_name: str


class ListTablesRequest(WireModel):
    exclusive_start_table_name: Optional[str] = None
    limit: Optional[int] = None


# =============================================================================
# Responses
# =============================================================================

class TableDescriptionResponse(WireModel):
    """
    Response of the table operations.

    CreateTable, UpdateTable and DeleteTable wrap the description in
    ``TableDescription``; DescribeTable wraps it in ``Table``.
    """
    table_description: Optional[TableDescription] = None
    table: Optional[TableDescription] = None

    @property
    def description(self) -> TableDescription:
        return self.table_description or self.table or TableDescription()


class ListTablesResponse(WireModel):
    table_names: List[str] = Field(default_factory=list)
    last_evaluated_table_name: Optional[str] = None
