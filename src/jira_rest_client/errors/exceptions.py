"""Structured exceptions raised by the request pipeline."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class JiraError(Exception):
    """Base exception for every failure surfaced by the client."""

    pass


class ConfigurationError(JiraError):
    """Local misconfiguration detected before a request is sent."""

    pass


class TransportError(JiraError):
    """The request never produced an HTTP response (DNS, TLS, timeout, reset)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ApiError(JiraError):
    """The server answered with a non-2xx status.

    ``messages`` may be empty when the body could not be parsed; the status
    code is always preserved.
    """

    def __init__(
        self,
        status: int,
        messages: list[str] | None = None,
        errors: Mapping[str, str] | None = None,
        headers: "httpx.Headers | None" = None,
        response: "httpx.Response | None" = None,
    ):
        self.status = status
        self.messages = list(messages) if messages is not None else []
        self.errors = dict(errors) if errors is not None else {}
        self.headers = headers
        self.response = response
        super().__init__(self._build_message())

    @property
    def status_code(self) -> int:
        return self.status

    def _build_message(self) -> str:
        details = list(self.messages)
        details.extend(f"{field}: {message}" for field, message in self.errors.items())
        if not details:
            return f"HTTP {self.status}"
        return f"HTTP {self.status}: " + "; ".join(details)


class DecodeError(JiraError):
    """A 2xx body did not match the requested type (or was not JSON)."""

    def __init__(self, raw_body: str, cause: BaseException | None = None):
        super().__init__(f"Could not decode response body: {raw_body!r}")
        self.raw_body = raw_body
        self.cause = cause
