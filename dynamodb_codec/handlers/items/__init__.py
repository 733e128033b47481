"""
Item CQRS APIs

Queries (Read Operations):
- GetItem, Query, Scan, BatchGetItem

Commands (Write Operations):
- PutItem, UpdateItem, DeleteItem, BatchWriteItem

Usage:
    from .queries import ItemReadApi
    from .commands import ItemWriteApi

    read_api = ItemReadApi(config)
    write_api = ItemWriteApi(config)
"""

from .queries import ItemReadApi
from .commands import ItemWriteApi

__all__ = [
    "ItemReadApi",
    "ItemWriteApi",
]
