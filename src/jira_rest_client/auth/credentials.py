"""Credential providers for JIRA requests.

A credential provider has one job: decorate an outgoing ``httpx.Request`` with
whatever authentication scheme it holds. The request pipeline never needs to
know which scheme that is.

Providers subclass ``httpx.Auth`` so they can also be handed to a plain
``httpx.AsyncClient`` when talking to endpoints outside this library.

Example:
    ```python
    from jira_rest_client.auth import BasicCredentials, BearerCredentials

    cloud = BasicCredentials("me@example.com", "api-token")
    server = BearerCredentials("personal-access-token")
    ```
"""

import base64
from collections.abc import Generator

import httpx

from jira_rest_client.auth.exceptions import InvalidCredentialError

AUTHORIZATION_HEADER = "Authorization"


class Credentials(httpx.Auth):
    """Base class for credential providers.

    Subclasses implement ``authorization`` and return the full header value.
    ``apply`` sets (never appends) the header, so applying twice is harmless.
    """

    def authorization(self) -> str:
        raise NotImplementedError

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Attach authentication to ``request`` in place.

        Raises:
            InvalidCredentialError: if the held material is blank
        """
        request.headers[AUTHORIZATION_HEADER] = self.authorization()
        return request

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.apply(request)


class BasicCredentials(Credentials):
    """HTTP basic auth. JIRA Cloud expects ``email:api_token`` here."""

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password

    @property
    def username(self) -> str:
        return self._username

    def authorization(self) -> str:
        if not _filled(self._username) or not _filled(self._password):
            raise InvalidCredentialError("Basic credentials require a non-empty username and password")
        userpass = f"{self._username}:{self._password}".encode()
        return "Basic " + base64.b64encode(userpass).decode("ascii")

    def __repr__(self) -> str:
        return f"BasicCredentials(username={self._username!r}, password='***')"


class BearerCredentials(Credentials):
    """Bearer token auth (JIRA Server/Data Center personal access tokens)."""

    def __init__(self, token: str):
        self._token = token

    def authorization(self) -> str:
        if not _filled(self._token):
            raise InvalidCredentialError("Bearer credentials require a non-empty token")
        return f"Bearer {self._token}"

    def __repr__(self) -> str:
        return "BearerCredentials(token='***')"


def _filled(value: str | None) -> bool:
    return bool(value and value.strip())
