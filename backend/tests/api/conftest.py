"""API test fixtures — ASGI client over the real application.

Invariants:
    - Limiter storage is reset before every test: counters never leak across tests
    - `client` connects from 127.0.0.1; `client_for` builds clients for other IPs

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the full middleware,
      dependency and exception handler stack without a server
"""

import pytest
from httpx import ASGITransport, AsyncClient

from nucleus.api.rate_limit import limiter
from nucleus.main import app


@pytest.fixture(autouse=True)
def reset_limiter():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def client_for():
    """Factory for clients connecting from a given IP address."""
    def _make(ip: str) -> AsyncClient:
        return AsyncClient(
            transport=ASGITransport(app=app, client=(ip, 50000)),
            base_url="http://test",
        )
    return _make
