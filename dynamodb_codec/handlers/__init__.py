"""
Handler Layer for the DynamoDB codec

Application-facing read and write APIs, split along Command Query
Responsibility Segregation (CQRS) lines.

The handler layer:
- Marshals caller records into attribute sets
- Builds request envelopes and validates them locally
- Sends them through the transport and parses the responses

Organization:
- items/: item CRUD, query, scan and batch operations
- tables/: table administration
- Each follows CQRS with queries.py (read) and commands.py (write)

Architecture:
handlers/ (this layer) -> core/ (marshaling, transport) -> DynamoDB
handlers/ (this layer) <- models/ (wire envelopes)
"""

from .items.queries import ItemReadApi
from .items.commands import ItemWriteApi
from .tables.queries import TableReadApi
from .tables.commands import TableWriteApi

__all__ = [
    'ItemReadApi',
    'ItemWriteApi',
    'TableReadApi',
    'TableWriteApi',
]
