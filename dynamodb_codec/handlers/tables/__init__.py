"""
Table Administration CQRS APIs

Queries: DescribeTable, ListTables
Commands: CreateTable, UpdateTable (throughput), DeleteTable
"""

from .queries import TableReadApi
from .commands import TableWriteApi

__all__ = [
    "TableReadApi",
    "TableWriteApi",
]
