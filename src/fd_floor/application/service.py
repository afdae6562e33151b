"""FloorPriceApplicationService — fetch → filter → select.

Strictly sequential per request; holds no state between requests.
The caller (router) passes the marketplace client; tests pass a mock.
"""

import logging
from typing import Any

from config.settings import settings
from src.fd_common.datetime_utils import unix_now
from src.fd_common.errors import (
    InternalError,
    NoActiveListingsError,
    NoValidListingsError,
)
from src.fd_floor.application.schemas import FloorPriceResponse
from src.fd_floor.domain.filtering import filter_valid_listings
from src.fd_floor.domain.models import FloorResult
from src.fd_floor.domain.selection import build_floor_result
from src.fd_marketplace.domain.client import MarketplaceClientProtocol
from src.fd_marketplace.domain.models import Listing, raw_end_time

logger = logging.getLogger(__name__)


def _unexpected_shape(exc: Exception) -> InternalError:
    return InternalError(
        "Failed to fetch floor price", cause=f"Unexpected listing shape: {exc!r}"
    )


def _unexpired(raw_listings: list[dict[str, Any]], now: int) -> list[dict[str, Any]]:
    try:
        return filter_valid_listings(raw_listings, now, end_time=raw_end_time)
    except (LookupError, TypeError, ValueError) as exc:
        raise _unexpected_shape(exc) from exc


def _parse_listings(raw_listings: list[dict[str, Any]]) -> list[Listing]:
    try:
        return [Listing.from_opensea(raw) for raw in raw_listings]
    except (LookupError, TypeError, ValueError) as exc:
        raise _unexpected_shape(exc) from exc


class FloorPriceApplicationService:
    def __init__(self, fetch_limit: int | None = None) -> None:
        # Only the minimum is needed, so a small page trades completeness
        # for latency. Orders beyond the page are never seen.
        self._fetch_limit = fetch_limit or settings.LISTINGS_FETCH_LIMIT

    async def find_floor(
        self,
        client: MarketplaceClientProtocol,
        slug: str,
        now: int | None = None,
    ) -> FloorResult:
        raw_listings = await client.fetch_listings(slug, self._fetch_limit)
        logger.info("Found %d listings for %s", len(raw_listings), slug)
        if not raw_listings:
            raise NoActiveListingsError(slug)

        # Expired orders are dropped before the full parse, so their other
        # fields are never inspected.
        unexpired = _unexpired(raw_listings, unix_now() if now is None else now)
        logger.info("Valid listings for %s: %d/%d", slug, len(unexpired), len(raw_listings))
        if not unexpired:
            raise NoValidListingsError(slug, total_listings=len(raw_listings))

        valid = _parse_listings(unexpired)
        result = build_floor_result(valid, total_listings=len(raw_listings))
        logger.info(
            "Floor listing for %s: token=%s price=%s %s",
            slug,
            result.listing.token_id,
            result.listing.price,
            result.listing.currency,
        )
        return result

    async def get_floor_price(
        self,
        client: MarketplaceClientProtocol,
        slug: str,
        now: int | None = None,
    ) -> FloorPriceResponse:
        result = await self.find_floor(client, slug, now)
        return FloorPriceResponse.from_result(result)
