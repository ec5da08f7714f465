"""Multi-source credential resolution.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

Example:
    ```python
    from jira_rest_client.auth import CredentialResolver, resolve_credentials

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_name="JIRA_API_TOKEN", required=True)

    # Or build a provider straight from the JIRA_* variables
    credentials = resolve_credentials(resolver)
    ```

Credential values are never logged; only their source is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from jira_rest_client.auth.credentials import BasicCredentials, BearerCredentials, Credentials
from jira_rest_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

EMAIL_ENV_VAR = "JIRA_EMAIL"
USERNAME_ENV_VAR = "JIRA_USERNAME"
API_TOKEN_ENV_VAR = "JIRA_API_TOKEN"
API_TOKEN_FILE_ENV_VAR = "JIRA_API_TOKEN_FILE"
BEARER_TOKEN_ENV_VAR = "JIRA_BEARER_TOKEN"
BASE_URL_ENV_VAR = "JIRA_BASE_URL"


class CredentialResolver:
    """Resolve credential values from explicit arguments, the environment or a file.

    A .env file is loaded into the process environment once, on construction,
    unless ``load_dotenv=False``.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a credential value.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to read.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: ***")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may come from ``file_path`` or from the ``env_var_name``
        environment variable; ``~`` and ``$VAR`` are expanded and the content
        is stripped of surrounding whitespace.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content


def resolve_credentials(resolver: CredentialResolver | None = None) -> Credentials:
    """Build a credential provider from the ``JIRA_*`` environment variables.

    A bearer token (``JIRA_BEARER_TOKEN``) wins. Otherwise basic credentials
    are built from ``JIRA_EMAIL`` (or ``JIRA_USERNAME``) and ``JIRA_API_TOKEN``
    (or the file named by ``JIRA_API_TOKEN_FILE``).

    Raises:
        CredentialNotFoundError: If neither scheme can be assembled.
    """
    resolver = resolver or CredentialResolver()

    bearer = resolver.resolve(env_var_name=BEARER_TOKEN_ENV_VAR)
    if bearer:
        return BearerCredentials(bearer)

    username = resolver.resolve(env_var_name=EMAIL_ENV_VAR) or resolver.resolve(env_var_name=USERNAME_ENV_VAR)
    if not username:
        raise CredentialNotFoundError(
            f"No JIRA credentials found (set {BEARER_TOKEN_ENV_VAR}, or {EMAIL_ENV_VAR} and {API_TOKEN_ENV_VAR})",
            env_var_name=EMAIL_ENV_VAR,
        )

    token = resolver.resolve(env_var_name=API_TOKEN_ENV_VAR) or resolver.resolve_from_file(
        env_var_name=API_TOKEN_FILE_ENV_VAR
    )
    if not token:
        raise CredentialNotFoundError(
            f"Found {username!r} but no API token (set {API_TOKEN_ENV_VAR} or {API_TOKEN_FILE_ENV_VAR})",
            env_var_name=API_TOKEN_ENV_VAR,
        )

    return BasicCredentials(username, token)
