"""Error model for JIRA REST responses."""

from jira_rest_client.errors.exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    JiraError,
    TransportError,
)
from jira_rest_client.errors.handler import decode_response, raise_for_status
from jira_rest_client.errors.models import ErrorCollection

__all__ = [
    "ApiError",
    "ConfigurationError",
    "DecodeError",
    "ErrorCollection",
    "JiraError",
    "TransportError",
    "decode_response",
    "raise_for_status",
]
