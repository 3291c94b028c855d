"""Rate Limiting — shared slowapi limiter, partitioned by client IP.

The limiter is created once and imported by main.py (attached to app.state and
paired with the 429 handler). Routes consume permits through the
`user_creation_limit` dependency, which FastAPI resolves before binding the
request body: malformed bodies are counted and rejected with 429 like any other.
Counter storage and its synchronization belong to the `limits` backend.
"""

from fastapi import Request
from slowapi import Limiter

from nucleus.config import get_settings

UNKNOWN_CLIENT = "unknown_ip"
REJECTION_MESSAGE = "Too many requests. Please try again later."
USER_CREATION_SCOPE = "user-creation"


def client_key(request: Request) -> str:
    """Partition key: the peer address, or a shared bucket when unknown."""
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


_settings = get_settings()

limiter = Limiter(
    key_func=client_key,
    strategy="fixed-window",
    storage_uri=_settings.rate_limit_storage_uri,
    enabled=_settings.rate_limit_enabled,
)


# One scope for every path spelling (/api/v1, /api/v1.0, /api) of the route
@limiter.shared_limit(_settings.user_creation_rate_limit, scope=USER_CREATION_SCOPE)
async def user_creation_limit(request: Request) -> None:
    """Dependency: consume one user-creation permit for the calling client."""
