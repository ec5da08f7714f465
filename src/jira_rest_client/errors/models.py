"""JIRA error payload models."""

from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic_core import from_json


@dataclass
class ErrorCollection:
    """Error body returned by JIRA for non-2xx responses.

    JIRA is not consistent about the shape of its error bodies. The common one
    is ``{"errorMessages": [...], "errors": {"field": "message"}}`` but some
    endpoints answer with a bare list of strings or ``{"message": "..."}``.

    See: https://docs.atlassian.com/software/jira/docs/api/REST/7.6.1/#error-responses
    """

    error_messages: list[str] = field(default_factory=list)  # Request-level messages
    errors: dict[str, str] = field(default_factory=dict)  # Field name -> message

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorCollection":
        """Parse an error body, falling back to an empty collection.

        Args:
            response: HTTP response object

        Returns:
            ErrorCollection, empty when the body is missing or unrecognised
        """
        try:
            data = from_json(response.content)
        except ValueError:
            # Empty body, HTML error page, bad encoding, nesting too deep
            return cls()

        return cls.from_data(data)

    @classmethod
    def from_data(cls, data: Any) -> "ErrorCollection":
        """Build a collection from already-decoded JSON."""
        if isinstance(data, list):
            return cls(error_messages=_strings(data))

        if not isinstance(data, dict):
            return cls()

        messages = _strings(data.get("errorMessages"))
        if not messages and isinstance(data.get("message"), str):
            messages = [data["message"]]

        errors = data.get("errors")
        if isinstance(errors, dict):
            errors = {str(k): str(v) for k, v in errors.items() if v is not None}
        else:
            errors = {}

        return cls(error_messages=messages, errors=errors)

    def is_empty(self) -> bool:
        return not self.error_messages and not self.errors


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]
