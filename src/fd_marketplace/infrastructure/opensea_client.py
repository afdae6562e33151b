"""OpenSeaClient — concrete implementation of MarketplaceClientProtocol.

Endpoints (OpenSea API v2, relative to OPENSEA_BASE_URL):
  GET  listings/collection/{slug}/all?limit=N
  POST listings/fulfillment_data

Non-2xx responses become UpstreamError with the raw body kept verbatim.
A timeout is also an UpstreamError (504); any other transport fault or an
undecodable body is an InternalError. No retries.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from src.fd_common.errors import InternalError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def _require(name: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{name} is required")
    return value.strip()


class OpenSeaClient:
    """Thin wrapper over a shared httpx.AsyncClient.

    The wrapped client carries base_url, the x-api-key header and the
    timeout; see src.fd_common.http_client.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def fetch_listings(self, slug: str, limit: int) -> list[dict[str, Any]]:
        slug = _require("Collection slug", slug)
        path = f"/listings/collection/{quote(slug, safe='')}/all"
        logger.info("Fetching listings: slug=%s limit=%d", slug, limit)

        data = await self._send(
            "GET", path, "OpenSea API error", params={"limit": limit}
        )
        listings = data.get("listings") if isinstance(data, dict) else None
        if listings is None:
            return []
        if not isinstance(listings, list):
            raise InternalError(
                "Failed to fetch floor price", cause="listings is not an array"
            )
        return listings

    async def fetch_fulfillment_data(
        self,
        order_hash: str,
        chain: str,
        protocol_address: str,
        fulfiller_address: str,
    ) -> Any:
        body = {
            "listing": {
                "hash": _require("orderHash", order_hash),
                "chain": _require("chain", chain),
                "protocol_address": _require("protocolAddress", protocol_address),
            },
            "fulfiller": {"address": _require("fulfillerAddress", fulfiller_address)},
        }
        logger.info("Requesting fulfillment data: order=%s chain=%s", order_hash, chain)

        data = await self._send(
            "POST",
            "/listings/fulfillment_data",
            "Failed to generate fulfillment data",
            json=body,
        )
        if not isinstance(data, dict) or "fulfillment_data" not in data:
            raise InternalError(
                "Failed to generate fulfillment data",
                cause="response has no fulfillment_data member",
            )
        return data["fulfillment_data"]

    async def _send(
        self, method: str, path: str, error_message: str, **kwargs: Any
    ) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("Marketplace timeout: %s %s", method, path)
            raise UpstreamError(
                error_message, 504, f"Marketplace request timed out: {exc!r}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Marketplace transport error: %s %s: %s", method, path, exc)
            raise InternalError(error_message, cause=str(exc) or repr(exc)) from exc

        if not response.is_success:
            logger.warning(
                "Marketplace returned %d for %s %s", response.status_code, method, path
            )
            logger.debug("Marketplace error body: %s", response.text)
            raise UpstreamError(error_message, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise InternalError(error_message, cause=f"Invalid JSON: {exc}") from exc
