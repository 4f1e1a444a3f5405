"""Shared async HTTP client for wikiHow requests.

Created lazily on first use and closed from the application lifespan.
Follows redirects so title URLs land on the canonical article page.
"""

import httpx

_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """Return a cached httpx.AsyncClient, creating it on first call."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(follow_redirects=True)
    return _client


async def close_http_client() -> None:
    """Close and drop the cached client. Safe to call when none was created."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
