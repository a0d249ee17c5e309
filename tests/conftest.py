"""Pytest configuration and shared fixtures."""

import os
from urllib.parse import urlsplit

import pytest
from dotenv import load_dotenv

from forgettable.client import ForgettableClient
from forgettable.transport import MockTransport

# Load .env file for FORGETTABLE_URL
load_dotenv()

ROOT_URL = "http://forgettable.io:51000"

# -- Forgettable server availability check (cached for the session) --

_server_available: bool | None = None


def _check_server() -> bool:
    """Check if FORGETTABLE_URL is set and reachable. Cached for the session."""
    global _server_available  # noqa: PLW0603
    if _server_available is not None:
        return _server_available
    url = os.environ.get("FORGETTABLE_URL")
    if not url:
        _server_available = False
        return _server_available
    import socket
    parts = urlsplit(url)
    try:
        with socket.create_connection((parts.hostname, parts.port or 80), timeout=2):
            _server_available = True
    except OSError:
        _server_available = False
    return _server_available


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that talk to a live Forgettable server"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip live-server tests when no server is reachable."""
    skip_server = pytest.mark.skip(reason="Forgettable server not reachable")
    if _check_server():
        return
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_server)


@pytest.fixture
def mock_client():
    """Factory building a client whose transport answers with a fixed body."""

    def _make(body, status_code=200, error=None):
        return ForgettableClient(ROOT_URL, MockTransport(body, status_code, error))

    return _make
