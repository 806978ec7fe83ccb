"""Shared persistent httpx client for calls to the OAuth provider.

A persistent client reuses TCP connections and TLS sessions across logins
instead of paying for a new handshake on every callback.
"""

import httpx

from minipress.constants import HTTPX_TIMEOUT

# Connection pool limits
_POOL_LIMITS = httpx.Limits(
    max_connections=20,
    max_keepalive_connections=10,
    keepalive_expiry=30,
)

_provider_client: httpx.AsyncClient | None = None


def get_provider_client() -> httpx.AsyncClient:
    """Get persistent httpx client for OAuth provider calls."""
    global _provider_client
    if _provider_client is None:
        _provider_client = httpx.AsyncClient(
            timeout=HTTPX_TIMEOUT,
            limits=_POOL_LIMITS,
            http2=False,
        )
    return _provider_client


async def close_all_clients() -> None:
    """Close persistent httpx clients. Call during app shutdown."""
    global _provider_client
    if _provider_client is not None:
        await _provider_client.aclose()
        _provider_client = None
