# Base envelope
from .base import WireModel

# Attribute shapes
from .attributes import (
    AttributeSet,
    AttributeValue,
    WireCategory,
    attribute_set_to_wire,
)

# Item and batch envelopes
from .requests import (
    BATCH_GET_ITEM_LIMIT,
    BATCH_WRITE_ITEM_LIMIT,
    REQUEST_SIZE_LIMIT_BYTES,
    # Enums
    ComparisonOperator,
    ReturnConsumedCapacity,
    ReturnValues,
    Select,
    UpdateAction,
    # Requests
    AttributeValueUpdate,
    BatchGetRequest,
    BatchWriteRequest,
    Condition,
    DeleteItemRequest,
    DeleteRequest,
    GetItemRequest,
    KeysAndAttributes,
    PutItemRequest,
    PutRequest,
    QueryRequest,
    ScanRequest,
    UpdateItemRequest,
    WriteRequest,
    # Responses
    BatchGetResponse,
    BatchWriteResponse,
    ConsumedCapacity,
    DeleteItemResponse,
    ErrorResponse,
    GetItemResponse,
    PutItemResponse,
    QueryResponse,
    ScanResponse,
    UpdateItemResponse,
)

# Table administration envelopes
from .tables import (
    LIST_TABLES_MAX_LIMIT,
    MAX_TABLE_NAME_LENGTH,
    MIN_TABLE_NAME_LENGTH,
    AttributeDefinition,
    CreateTableRequest,
    KeySchemaElement,
    KeyType,
    ListTablesRequest,
    ListTablesResponse,
    LocalSecondaryIndex,
    Projection,
    ProjectionType,
    ProvisionedThroughput,
    TableDescription,
    TableDescriptionResponse,
    TableNameRequest,
    TableStatus,
    UpdateTableRequest,
)

__all__ = [
    "WireModel",

    # Attributes
    "AttributeSet",
    "AttributeValue",
    "WireCategory",
    "attribute_set_to_wire",

    # Limits
    "BATCH_GET_ITEM_LIMIT",
    "BATCH_WRITE_ITEM_LIMIT",
    "LIST_TABLES_MAX_LIMIT",
    "MAX_TABLE_NAME_LENGTH",
    "MIN_TABLE_NAME_LENGTH",
    "REQUEST_SIZE_LIMIT_BYTES",

    # Enums
    "ComparisonOperator",
    "KeyType",
    "ProjectionType",
    "ReturnConsumedCapacity",
    "ReturnValues",
    "Select",
    "TableStatus",
    "UpdateAction",

    # Item envelopes
    "AttributeValueUpdate",
    "BatchGetRequest",
    "BatchGetResponse",
    "BatchWriteRequest",
    "BatchWriteResponse",
    "Condition",
    "ConsumedCapacity",
    "DeleteItemRequest",
    "DeleteItemResponse",
    "DeleteRequest",
    "ErrorResponse",
    "GetItemRequest",
    "GetItemResponse",
    "KeysAndAttributes",
    "PutItemRequest",
    "PutItemResponse",
    "PutRequest",
    "QueryRequest",
    "QueryResponse",
    "ScanRequest",
    "ScanResponse",
    "UpdateItemRequest",
    "UpdateItemResponse",
    "WriteRequest",

    # Table envelopes
    "AttributeDefinition",
    "CreateTableRequest",
    "KeySchemaElement",
    "ListTablesRequest",
    "ListTablesResponse",
    "LocalSecondaryIndex",
    "Projection",
    "ProvisionedThroughput",
    "TableDescription",
    "TableDescriptionResponse",
    "TableNameRequest",
    "UpdateTableRequest",
]
