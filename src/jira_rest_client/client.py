"""Request pipeline for the JIRA REST API.

Every API call goes through ``Client.request``: it builds the URL from the
base URL, API version and resource path, merges headers, attaches
credentials, performs exactly one HTTP exchange and turns the response into
either a decoded ``Resp`` or one of the ``JiraError`` variants.

Example:
    ```python
    from jira_rest_client import BasicCredentials, Client
    from jira_rest_client.v2 import ApplicationRole

    async with Client.create("https://jira.example.com", BasicCredentials("me@example.com", "token")) as client:
        role = await client.get("applicationrole/jira-core", ApplicationRole)
        resp = await client.get_resp("applicationrole", list[ApplicationRole])
        print(resp.headers.get("etag"))
    ```
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Generic, TypeVar, overload

import httpx
from pydantic_core import to_json

from jira_rest_client.auth.credentials import Credentials
from jira_rest_client.auth.resolver import BASE_URL_ENV_VAR, CredentialResolver, resolve_credentials
from jira_rest_client.errors.exceptions import ConfigurationError, TransportError
from jira_rest_client.errors.handler import decode_response, raise_for_status
from jira_rest_client.transport import create_transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_API_VERSION = "2"
DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {"Accept": "application/json", "Content-Type": "application/json"}
)

# Methods that never carry a request body
BODYLESS_METHODS: frozenset[str] = frozenset(["GET", "DELETE"])


@dataclass(frozen=True)
class Resp(Generic[T]):
    """A decoded payload together with the response headers it arrived with."""

    data: T
    headers: httpx.Headers
    status_code: int


@dataclass(frozen=True, eq=False)
class Client:
    """Immutable JIRA client configuration plus the shared HTTP client.

    ``with_header``/``with_headers`` return modified copies; the copies share
    the underlying ``httpx.AsyncClient`` (connection pooling belongs to its
    transport) but never each other's headers.

    Attributes:
        base_url: Scheme and host of the JIRA instance, e.g. ``https://jira.example.com``.
        credentials: Provider that authenticates each request.
        headers: Default headers sent with every request.
        http: The ``httpx.AsyncClient`` used to send requests.
    """

    base_url: str
    credentials: Credentials | None = None
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    http: httpx.AsyncClient = field(
        default_factory=lambda: httpx.AsyncClient(timeout=DEFAULT_TIMEOUT), repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def create(
        cls,
        base_url: str,
        credentials: Credentials | None,
        *,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        log_requests: bool = False,
    ) -> "Client":
        """Build a client with its own ``httpx.AsyncClient``.

        Args:
            base_url: Scheme and host of the JIRA instance.
            credentials: Credential provider.
            headers: Extra default headers, merged over ``DEFAULT_HEADERS``.
            transport: Transport to send requests through (defaults to
                ``httpx.AsyncHTTPTransport``). Tests pass ``httpx.MockTransport``.
            timeout: Request timeout handed to httpx.
            log_requests: Wrap the transport in ``LoggingTransport``.
        """
        http = httpx.AsyncClient(
            transport=create_transport(transport, log_requests=log_requests),
            timeout=timeout,
        )
        return cls(
            base_url=base_url,
            credentials=credentials,
            headers=_merge_headers(DEFAULT_HEADERS, headers or {}),
            http=http,
        )

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None, **kwargs: Any) -> "Client":
        """Build a client from ``JIRA_BASE_URL`` and the ``JIRA_*`` credential variables.

        Keyword arguments are passed through to ``create``.

        Raises:
            CredentialNotFoundError: If the base URL or credentials are missing.
        """
        resolver = resolver or CredentialResolver()
        base_url = resolver.resolve(env_var_name=BASE_URL_ENV_VAR, required=True)
        return cls.create(base_url, resolve_credentials(resolver), **kwargs)

    def with_header(self, name: str, value: str) -> "Client":
        """Return a copy of this client with one extra default header."""
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> "Client":
        """Return a copy of this client with ``headers`` merged over the defaults."""
        return replace(self, headers=_merge_headers(self.headers, headers))

    def url_for(self, resource_path: str, api_version: str = DEFAULT_API_VERSION) -> str:
        return f"{self.base_url}/rest/api/{api_version}/{resource_path.lstrip('/')}"

    @overload
    async def request(
        self,
        method: str,
        resource_path: str,
        response_type: None = None,
        *,
        api_version: str = ...,
        params: Mapping[str, str] | None = ...,
        headers: Mapping[str, str] | None = ...,
        json: Any = ...,
    ) -> Resp[None]: ...

    @overload
    async def request(
        self,
        method: str,
        resource_path: str,
        response_type: type[T],
        *,
        api_version: str = ...,
        params: Mapping[str, str] | None = ...,
        headers: Mapping[str, str] | None = ...,
        json: Any = ...,
    ) -> Resp[T]: ...

    async def request(
        self,
        method: str,
        resource_path: str,
        response_type: type[T] | None = None,
        *,
        api_version: str = DEFAULT_API_VERSION,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> Resp[T] | Resp[None]:
        """Send one request and classify the response.

        Args:
            method: HTTP method.
            resource_path: Path below ``/rest/api/{version}/``, e.g. ``applicationrole/jira-core``.
            response_type: Type to validate a 2xx body into. None discards the body.
            api_version: REST API version segment.
            params: Query parameters, usually from the ``options`` builders.
            headers: Per-call headers; they win over the client defaults.
            json: Request body for PUT/POST. Pydantic models are dumped by alias.
                Ignored for GET and DELETE.

        Returns:
            Resp with the decoded payload and the response headers.

        Raises:
            ConfigurationError: If credentials are missing or invalid. Nothing is sent.
            TransportError: If no response was received.
            ApiError: If the response status is not 2xx.
            DecodeError: If a 2xx body does not match ``response_type``.
        """
        method = method.upper()

        if self.credentials is None:
            raise ConfigurationError("No credentials configured; refusing to send an unauthenticated request")

        url = self.url_for(resource_path, api_version)
        request = self.http.build_request(
            method,
            url,
            params=params or None,
            headers=_merge_headers(self.headers, headers or {}),
            content=_serialize_body(method, json),
        )
        self.credentials.apply(request)

        logger.debug(f"{method} {request.url}")
        try:
            response = await self.http.send(request)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e
        logger.debug(f"{method} {request.url} returned {response.status_code}")

        raise_for_status(response)
        data = decode_response(response, response_type)
        return Resp(data=data, headers=response.headers, status_code=response.status_code)

    @overload
    async def get_resp(self, resource_path: str, response_type: None = None, **kwargs: Any) -> Resp[None]: ...
    @overload
    async def get_resp(self, resource_path: str, response_type: type[T], **kwargs: Any) -> Resp[T]: ...
    async def get_resp(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> Resp[Any]:
        return await self.request("GET", resource_path, response_type, **kwargs)

    @overload
    async def put_resp(self, resource_path: str, response_type: None = None, **kwargs: Any) -> Resp[None]: ...
    @overload
    async def put_resp(self, resource_path: str, response_type: type[T], **kwargs: Any) -> Resp[T]: ...
    async def put_resp(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> Resp[Any]:
        return await self.request("PUT", resource_path, response_type, **kwargs)

    @overload
    async def post_resp(self, resource_path: str, response_type: None = None, **kwargs: Any) -> Resp[None]: ...
    @overload
    async def post_resp(self, resource_path: str, response_type: type[T], **kwargs: Any) -> Resp[T]: ...
    async def post_resp(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> Resp[Any]:
        return await self.request("POST", resource_path, response_type, **kwargs)

    @overload
    async def delete_resp(self, resource_path: str, response_type: None = None, **kwargs: Any) -> Resp[None]: ...
    @overload
    async def delete_resp(self, resource_path: str, response_type: type[T], **kwargs: Any) -> Resp[T]: ...
    async def delete_resp(
        self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any
    ) -> Resp[Any]:
        return await self.request("DELETE", resource_path, response_type, **kwargs)

    @overload
    async def get(self, resource_path: str, response_type: None = None, **kwargs: Any) -> None: ...
    @overload
    async def get(self, resource_path: str, response_type: type[T], **kwargs: Any) -> T: ...
    async def get(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> T | None:
        return (await self.get_resp(resource_path, response_type, **kwargs)).data

    @overload
    async def put(self, resource_path: str, response_type: None = None, **kwargs: Any) -> None: ...
    @overload
    async def put(self, resource_path: str, response_type: type[T], **kwargs: Any) -> T: ...
    async def put(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> T | None:
        return (await self.put_resp(resource_path, response_type, **kwargs)).data

    @overload
    async def post(self, resource_path: str, response_type: None = None, **kwargs: Any) -> None: ...
    @overload
    async def post(self, resource_path: str, response_type: type[T], **kwargs: Any) -> T: ...
    async def post(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> T | None:
        return (await self.post_resp(resource_path, response_type, **kwargs)).data

    @overload
    async def delete(self, resource_path: str, response_type: None = None, **kwargs: Any) -> None: ...
    @overload
    async def delete(self, resource_path: str, response_type: type[T], **kwargs: Any) -> T: ...
    async def delete(self, resource_path: str, response_type: type[T] | None = None, **kwargs: Any) -> T | None:
        return (await self.delete_resp(resource_path, response_type, **kwargs)).data

    async def aclose(self) -> None:
        """Close the shared HTTP client. Affects every copy of this client."""
        await self.http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def _merge_headers(base: Mapping[str, str], extra: Mapping[str, str]) -> dict[str, str]:
    """Merge ``extra`` over ``base`` with case-insensitive names, keeping the caller's casing."""
    merged = dict(base)
    for name, value in extra.items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def _serialize_body(method: str, body: Any) -> bytes | None:
    if body is None or method in BODYLESS_METHODS:
        return None
    return to_json(body, by_alias=True)
