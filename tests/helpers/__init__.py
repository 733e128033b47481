"""
Test helpers for the DynamoDB codec.

Sample records in every supported shape and a builder for fake HTTP
responses.
"""

from .records import (
    Color,
    Event,
    Gadget,
    Point,
    Reading,
    UserKey,
    UserProfile,
)
from .responses import make_response

__all__ = [
    'Color',
    'Event',
    'Gadget',
    'Point',
    'Reading',
    'UserKey',
    'UserProfile',
    'make_response',
]
