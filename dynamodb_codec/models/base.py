"""
Base Wire Model

Every request and response envelope exchanged with DynamoDB's JSON API is a
``WireModel``. Python-side field names are snake_case; the wire names are the
PascalCase keys the service expects, produced by Pydantic's ``to_pascal``
alias generator:

```python
class GetItemRequest(WireModel):
    table_name: str
    consistent_read: Optional[bool] = None

GetItemRequest(table_name="users").to_wire()
# {'TableName': 'users'}
```

Rules shared by all envelopes:

- Absent values (``None``) are never emitted, not even as ``null``.
- Envelopes are frozen once built.
- Unknown keys in service responses are ignored, so newer API fields do not
  break parsing.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_pascal

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """
    Base class for DynamoDB JSON envelopes.

    Provides the canonical conversion in both directions:
    - to_wire(): model -> JSON-ready dict with service key names
    - from_wire(): service payload -> model
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    def to_wire(self) -> Dict[str, Any]:
        """
        Convert the envelope to the JSON document sent to DynamoDB.

        Returns:
            Dictionary keyed by wire names, without absent members
        """
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, payload: Dict[str, Any]):
        """
        Parse a JSON document returned by DynamoDB.

        Args:
            payload: Decoded JSON response body

        Returns:
            Model instance

        Raises:
            ValidationError: If the payload does not match the envelope shape
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            logger.error(f"Failed to parse {cls.__name__} from response: {e}")
            raise ValidationError(f"Failed to parse {cls.__name__} from response: {e}", original_error=e) from e
