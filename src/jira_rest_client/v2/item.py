"""Embedded list wrapper used by expandable fields."""

from typing import Any

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_json

from jira_rest_client.errors.exceptions import DecodeError
from jira_rest_client.errors.handler import RAW_BODY_SNIPPET, type_adapter
from jira_rest_client.v2.base import Entity


class Item(Entity):
    """``{"size": n, "items": [...]}`` as returned for expanded collections.

    ``items`` stays untyped until ``decode`` is called, since the same wrapper
    carries groups, application roles and other resources.
    """

    size: int = 0
    items: list[Any] = Field(default_factory=list)

    def decode(self, item_type: type) -> list[Any]:
        """Validate ``items`` as a list of ``item_type``.

        Raises:
            DecodeError: if an item does not match ``item_type``
        """
        try:
            return type_adapter(list[item_type]).validate_python(self.items)
        except PydanticValidationError as e:
            raw = to_json(self.items).decode("utf-8", errors="replace")
            raise DecodeError(raw[:RAW_BODY_SNIPPET], cause=e) from e
