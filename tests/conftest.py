"""Shared test fixtures for dns01-cloudflare."""

from unittest.mock import MagicMock

import pytest

_ENV_VARS = (
    "CLOUDFLARE_EMAIL",
    "CLOUDFLARE_API_KEY",
    "CLOUDFLARE_API_TOKEN",
    "CLOUDFLARE_API_URL",
    "CLOUDFLARE_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_cloudflare_env(monkeypatch):
    """Keep the developer's Cloudflare environment out of unit tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _make_api_client(routes: dict) -> MagicMock:
    """Build a mock API client answering ``make_request`` from a route table.

    Keys are ``(method, uri)`` tuples; values are returned as the ``result``
    payload, or raised when they are exceptions. An unknown route raises
    KeyError so unexpected requests fail the test.
    """
    client = MagicMock()

    def make_request(method, uri, body=None):
        result = routes[(method, uri)]
        if isinstance(result, Exception):
            raise result
        return result

    client.make_request.side_effect = make_request
    return client


@pytest.fixture
def api_client():
    """Factory fixture: ``api_client(routes)`` returns a routed mock API client."""
    return _make_api_client
