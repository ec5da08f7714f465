"""Authentication components for the JIRA client.

This module provides:
- Credential providers (basic auth and bearer token) that decorate requests
- Multi-source credential resolution (value → env → .env → default)

Example:
    ```python
    from jira_rest_client.auth import BasicCredentials, CredentialResolver

    resolver = CredentialResolver()
    credentials = BasicCredentials(
        resolver.resolve(env_var_name="JIRA_EMAIL", required=True),
        resolver.resolve(env_var_name="JIRA_API_TOKEN", required=True),
    )
    ```
"""

from jira_rest_client.auth.credentials import BasicCredentials, BearerCredentials, Credentials
from jira_rest_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    InvalidCredentialError,
)
from jira_rest_client.auth.resolver import CredentialResolver, resolve_credentials

__all__ = [
    "BasicCredentials",
    "BearerCredentials",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "InvalidCredentialError",
    "resolve_credentials",
]
