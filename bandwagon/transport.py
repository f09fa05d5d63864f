"""Per-attempt HTTP transport.

Every race attempt gets its own ``httpx.AsyncClient`` with short per-phase
timeouts and no connection reuse, so attempts never share a socket.

httpx does not send ``Expect: 100-continue``; there is no expect-continue
phase to bound.
"""

from typing import Callable

import httpx

# Per-phase timeout: connect (includes the TLS handshake), read (includes
# waiting for response headers), write and pool acquisition.
ATTEMPT_TIMEOUT = 5.0

# Idle connection expiry.
KEEPALIVE_EXPIRY = 5.0

TRANSPORT_HEADERS = {
    "Accept-Encoding": "identity",
    "Connection": "close",
}

ClientFactory = Callable[[], httpx.AsyncClient]


def make_async_client(timeout: float = ATTEMPT_TIMEOUT) -> httpx.AsyncClient:
    """Build a fresh, non-pooled client for a single attempt."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        limits=httpx.Limits(
            max_connections=1,
            max_keepalive_connections=0,
            keepalive_expiry=KEEPALIVE_EXPIRY,
        ),
        headers=TRANSPORT_HEADERS,
        follow_redirects=False,
    )


def client_factory(timeout: float = ATTEMPT_TIMEOUT) -> ClientFactory:
    """Bind a timeout into a zero-argument factory for the race executor."""

    def _factory() -> httpx.AsyncClient:
        return make_async_client(timeout)

    return _factory
