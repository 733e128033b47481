"""
Attribute Models

The typed-attribute shapes at the heart of DynamoDB's wire format:

- WireCategory: the six attribute representations this library emits
- AttributeValue: a tagged union holding exactly one populated member
- AttributeSet: attribute name -> AttributeValue, i.e. an item or a key
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_serializer

from ..exceptions import MarshalInvariantError


class WireCategory(str, Enum):
    """Attribute types DynamoDB accepts in the S/N/B family."""
    STRING = "S"
    NUMBER = "N"
    BINARY = "B"
    STRING_SET = "SS"
    NUMBER_SET = "NS"
    BINARY_SET = "BS"

    @property
    def is_set(self) -> bool:
        """Whether values of this category are lists of members."""
        return self in _SET_CATEGORIES

    @classmethod
    def from_token(cls, token: str) -> Optional["WireCategory"]:
        """Look up a category by its wire token, case-sensitively."""
        for category in cls:
            if category.value == token:
                return category
        return None


_SET_CATEGORIES = frozenset({WireCategory.STRING_SET, WireCategory.NUMBER_SET, WireCategory.BINARY_SET})


class AttributeValue(BaseModel):
    """
    One DynamoDB attribute value.

    Exactly one member may be non-empty for the value to be valid. Serialization
    emits only non-empty members, so an unset member never appears on the wire
    as null or as an empty string/list.
    """

    S: Optional[str] = None
    N: Optional[str] = None
    B: Optional[str] = None
    SS: Optional[Tuple[str, ...]] = None
    NS: Optional[Tuple[str, ...]] = None
    BS: Optional[Tuple[str, ...]] = None

    model_config = ConfigDict(frozen=True, extra='ignore')

    @classmethod
    def of(cls, category: WireCategory, encoded: Any) -> "AttributeValue":
        """Build a single-member value for a category.

        Args:
            category: Wire category of the member to populate
            encoded: Encoded string (scalar categories) or sequence of strings (set categories)
        """
        if category.is_set:
            return cls(**{category.value: tuple(encoded)})
        return cls(**{category.value: encoded})

    def populated(self) -> List[WireCategory]:
        """Categories whose member is non-empty, in declaration order."""
        return [category for category in WireCategory if getattr(self, category.value)]

    def is_valid(self) -> bool:
        """True iff exactly one member is non-empty."""
        return len(self.populated()) == 1

    @property
    def category(self) -> WireCategory:
        """The category of a valid value.

        Raises:
            MarshalInvariantError: If the value is not valid
        """
        populated = self.populated()
        if len(populated) != 1:
            raise MarshalInvariantError(f"AttributeValue has {len(populated)} populated members, expected exactly 1")
        return populated[0]

    @model_serializer
    def serialize_members(self) -> Dict[str, Any]:
        members = {}
        for category in self.populated():
            value = getattr(self, category.value)
            members[category.value] = list(value) if category.is_set else value
        return members


# Item, key, or any other attribute-name -> value mapping.
AttributeSet = Dict[str, AttributeValue]


def attribute_set_to_wire(attributes: AttributeSet) -> Dict[str, Dict[str, Any]]:
    """Serialize a bare AttributeSet (outside of an envelope)."""
    return {name: value.model_dump() for name, value in attributes.items()}
