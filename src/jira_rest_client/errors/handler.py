"""Response classification for the request pipeline."""

from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from jira_rest_client.errors.exceptions import ApiError, DecodeError
from jira_rest_client.errors.models import ErrorCollection

# Characters of the raw body kept on DecodeError
RAW_BODY_SNIPPET = 200


def raise_for_status(response: httpx.Response) -> None:
    """Raise ApiError for non-2xx responses.

    The error body is parsed on a best-effort basis; the status code is kept
    even when nothing in the body can be understood.

    Args:
        response: HTTP response object

    Raises:
        ApiError: if the response status is not 2xx
    """
    if response.is_success:
        return

    collection = ErrorCollection.from_response(response)

    raise ApiError(
        status=response.status_code,
        messages=collection.error_messages,
        errors=collection.errors,
        headers=response.headers,
        response=response,
    )


@lru_cache(maxsize=128)
def type_adapter(response_type: Any) -> TypeAdapter:
    """Return a cached ``TypeAdapter`` for ``response_type``."""
    return TypeAdapter(response_type)


def decode_response(response: httpx.Response, response_type: Any) -> Any:
    """Validate a successful response body into ``response_type``.

    Args:
        response: HTTP response with a 2xx status
        response_type: Any type pydantic can validate (models, ``list[Model]``,
            ``dict``...). ``None`` discards the body.

    Returns:
        The decoded value, or None when ``response_type`` is None

    Raises:
        DecodeError: if the body is not JSON or does not match the type
    """
    if response_type is None:
        return None

    try:
        return type_adapter(response_type).validate_json(response.content)
    except PydanticValidationError as e:
        raise DecodeError(_snippet(response), cause=e) from e


def _snippet(response: httpx.Response) -> str:
    try:
        text = response.text
    except (UnicodeDecodeError, LookupError):
        text = response.content.decode("utf-8", errors="replace")
    return text[:RAW_BODY_SNIPPET]
