"""Pytest configuration and shared fixtures for jira-rest-client tests."""

import os

import pytest

from jira_rest_client.testing import make_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear JIRA and test-related environment variables before each test.

    This prevents a developer's real JIRA configuration from leaking into
    credential resolution tests.
    """
    test_prefixes = ("JIRA_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
async def client_factory():
    """Build clients wired to recording transports; closes them afterwards."""
    clients = []

    def factory(handler=None, **kwargs):
        client, transport = make_client(handler, **kwargs)
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        await client.aclose()
