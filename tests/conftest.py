"""Shared pytest fixtures."""

import socket

import pytest


@pytest.fixture
def occupied_port():
    """Yield a loopback port held by a listening socket."""

    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    try:
        yield listener.getsockname()[1]
    finally:
        listener.close()
