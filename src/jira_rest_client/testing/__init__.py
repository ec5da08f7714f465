"""Testing utilities for code built on the JIRA client.

Example:
    ```python
    import pytest

    from jira_rest_client.errors import ApiError
    from jira_rest_client.testing import create_error_response, make_client
    from jira_rest_client.v2 import ApplicationRole


    async def test_missing_role():
        client, transport = make_client(create_error_response(404, "No role found"))
        with pytest.raises(ApiError):
            await ApplicationRole.from_key(client, "nope")
        assert transport.last_request.url.path == "/rest/api/2/applicationrole/nope"
    ```
"""

from jira_rest_client.testing.factories import (
    TEST_BASE_URL,
    RecordingTransport,
    create_error_response,
    create_mock_response,
    make_client,
)

__all__ = [
    "TEST_BASE_URL",
    "RecordingTransport",
    "create_error_response",
    "create_mock_response",
    "make_client",
]
