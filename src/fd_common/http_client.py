"""Shared httpx client for the marketplace API.

One pooled AsyncClient per process, created at startup and closed at
shutdown. The API key lives only in the client's default headers.
"""

import httpx

from config.settings import Settings, settings

_http_client: httpx.AsyncClient | None = None


def init_http_client(cfg: Settings = settings) -> httpx.AsyncClient:
    """Create the shared client (idempotent)."""
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            base_url=cfg.OPENSEA_BASE_URL,
            headers={
                "accept": "application/json",
                "x-api-key": cfg.OPENSEA_API_KEY,
            },
            timeout=httpx.Timeout(cfg.MARKETPLACE_TIMEOUT_SECONDS),
        )
    return _http_client


def get_http_client() -> httpx.AsyncClient:
    if _http_client is None:
        raise RuntimeError("HTTP client not initialised; call init_http_client() first")
    return _http_client


async def close_http_client() -> None:
    """Close the shared client and its connection pool."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
