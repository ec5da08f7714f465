"""Request logging transport.

Wraps any ``httpx.AsyncBaseTransport`` and logs one line per exchange. Headers
and bodies are never logged, so credentials cannot leak through it. Failures
are logged and re-raised unchanged; this layer never retries.

## Example

```python
import httpx

from jira_rest_client.transport import LoggingTransport

transport = LoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://jira.example.com/rest/api/2/myself")
```
"""

import logging
import time

import httpx

logger = logging.getLogger(__name__)


class LoggingTransport(httpx.AsyncBaseTransport):
    """Log method, URL, status and elapsed time of every request.

    Args:
        wrapped_transport: The underlying transport to wrap
        slow_request_threshold: Seconds after which a completed request is
            logged at WARNING instead of DEBUG (default: None, never)
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        slow_request_threshold: float | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.slow_request_threshold = slow_request_threshold

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request through the wrapped transport, logging the outcome.

        Args:
            request: The HTTP request to send

        Returns:
            The wrapped transport's response, unchanged
        """
        started = time.monotonic()

        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except Exception as e:
            elapsed = time.monotonic() - started
            logger.warning(f"Request {request.method} {request.url} failed after {elapsed:.3f}s: {e!r}")
            raise

        elapsed = time.monotonic() - started
        if self._is_slow(elapsed):
            logger.warning(
                f"Request {request.method} {request.url} returned {response.status_code} "
                f"in {elapsed:.3f}s (slower than {self.slow_request_threshold}s)"
            )
        else:
            logger.debug(f"Request {request.method} {request.url} returned {response.status_code} in {elapsed:.3f}s")

        return response

    def _is_slow(self, elapsed: float) -> bool:
        return self.slow_request_threshold is not None and elapsed > self.slow_request_threshold


def create_transport(
    transport: httpx.AsyncBaseTransport | None = None,
    *,
    log_requests: bool = False,
    slow_request_threshold: float | None = None,
) -> httpx.AsyncBaseTransport | None:
    """Build the transport stack for a client.

    Args:
        transport: Base transport. None lets httpx use its default, unless
            logging is requested, in which case ``httpx.AsyncHTTPTransport`` is used.
        log_requests: Wrap the transport in ``LoggingTransport``.
        slow_request_threshold: Passed to ``LoggingTransport``.

    Returns:
        The transport to hand to ``httpx.AsyncClient``, or None for httpx's default
    """
    if not log_requests:
        return transport

    return LoggingTransport(
        wrapped_transport=transport or httpx.AsyncHTTPTransport(),
        slow_request_threshold=slow_request_threshold,
    )
