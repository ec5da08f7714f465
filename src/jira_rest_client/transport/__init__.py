"""Transport layer components.

Transports wrap httpx's ``AsyncBaseTransport``; the request pipeline hands
whatever ``create_transport`` returns to its ``httpx.AsyncClient``.

Modules:
    logging_transport: Request/response logging without headers or bodies

Example:
    ```python
    from jira_rest_client.transport import create_transport

    transport = create_transport(log_requests=True, slow_request_threshold=5.0)
    ```
"""

from jira_rest_client.transport.logging_transport import LoggingTransport, create_transport

__all__ = ["LoggingTransport", "create_transport"]
