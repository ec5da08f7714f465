"""JIRA REST Client - typed async client for the JIRA REST API.

This library provides:
- A single request pipeline (URL building, header merging, auth, response
  classification and typed decoding)
- Credential providers and multi-source credential resolution
- A flat, structured error model (transport / API / decode / configuration)
- Typed v2 resources (application roles, users, groups)
- Testing utilities

Example:
    ```python
    from jira_rest_client import Client, Expand
    from jira_rest_client.v2 import User

    async with Client.from_env() as client:
        user = await User.from_username(client, "fred", expand=[Expand.GROUPS])
        print([group.name for group in user.list_groups()])
    ```
"""

from jira_rest_client.auth import BasicCredentials, BearerCredentials, CredentialResolver, Credentials
from jira_rest_client.client import Client, Resp
from jira_rest_client.errors import ApiError, ConfigurationError, DecodeError, JiraError, TransportError
from jira_rest_client.options import ApplicationRoleOptions, Expand, Pagination, UserOptions

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApplicationRoleOptions",
    "BasicCredentials",
    "BearerCredentials",
    "Client",
    "ConfigurationError",
    "CredentialResolver",
    "Credentials",
    "DecodeError",
    "Expand",
    "JiraError",
    "Pagination",
    "Resp",
    "TransportError",
    "UserOptions",
    "__version__",
]
