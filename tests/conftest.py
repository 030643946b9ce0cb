"""Pytest fixtures shared by the HTTP test helper tests.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest
import requests

from http_test_helpers import HttpResponseBuilder
from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    raise NetworkIsolationError(args)


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Block all network access in tests.

    Nothing in this library performs I/O, so any connection attempt is a bug in
    the code under test or in the test itself.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture
def builder() -> HttpResponseBuilder:
    return HttpResponseBuilder()


@pytest.fixture
def prepared_request() -> requests.PreparedRequest:
    return requests.Request(
        "GET",
        "https://api.example.com/items/42",
        headers={"Accept": "application/json"},
    ).prepare()
