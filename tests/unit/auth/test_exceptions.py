"""Tests for credential exceptions."""

import pytest

from jira_rest_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    InvalidCredentialError,
)
from jira_rest_client.errors import ConfigurationError, JiraError


class TestCredentialError:
    def test_is_configuration_error(self):
        """Credential problems surface as configuration errors."""
        with pytest.raises(ConfigurationError):
            raise CredentialError("Test error")

    def test_is_jira_error(self):
        assert issubclass(CredentialError, JiraError)

    def test_exception_message(self):
        assert str(CredentialError("Custom error message")) == "Custom error message"


class TestCredentialNotFoundError:
    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        error = CredentialNotFoundError("Test error", env_var_name="JIRA_API_TOKEN")
        assert error.env_var_name == "JIRA_API_TOKEN"

    def test_env_var_name_optional(self):
        assert CredentialNotFoundError("Test error").env_var_name is None


@pytest.mark.parametrize("exc_class", [CredentialFileError, InvalidCredentialError])
def test_subclasses_are_credential_errors(exc_class):
    with pytest.raises(CredentialError):
        raise exc_class("Test error")
