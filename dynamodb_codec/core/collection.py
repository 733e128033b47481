"""
Collection Encoding

Turns a list, tuple, set or frozenset into the member list of a set-typed
attribute (SS, NS, BS).
"""

from typing import Any, Callable, Iterable, List

from ..exceptions import EncodingError
from .inference import is_number_string
from .scalar import encode_scalar


def encode_collection(values: Iterable[Any], encode: Callable[[Any], str] = encode_scalar) -> List[str]:
    """
    Encode every element and collect the distinct non-empty results.

    Elements encoding to "" are dropped. DynamoDB sets reject duplicates, so
    only the first occurrence of each member is kept. Input order is
    preserved for sequences; unordered inputs (set, frozenset) come out
    sorted so the same set always encodes the same way.

    Args:
        values: The collection to encode
        encode: Per-element encoder

    Returns:
        Member list, possibly empty
    """
    members: List[str] = []
    seen = set()
    for element in values:
        member = encode(element)
        if not member or member in seen:
            continue
        seen.add(member)
        members.append(member)

    if isinstance(values, (set, frozenset)):
        members.sort()
    return members


def validate_number_members(members: List[str]) -> List[str]:
    """
    Check every NS member is numeric text.

    Raises:
        EncodingError: A member is not a number
    """
    for member in members:
        if not is_number_string(member):
            raise EncodingError(f"Number set member {member!r} is not numeric")
    return members
