"""Exceptions for credential resolution and authentication.

Every credential problem is a ``ConfigurationError``: it is detected locally,
before any request reaches the network.

Example:
    ```python
    from jira_rest_client.auth.exceptions import CredentialNotFoundError

    if not api_token:
        raise CredentialNotFoundError("API token not found", env_var_name="JIRA_API_TOKEN")
    ```
"""

from jira_rest_client.errors.exceptions import ConfigurationError


class CredentialError(ConfigurationError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass


class InvalidCredentialError(CredentialError):
    """Raised when credential material is present but unusable (blank values)."""

    pass
