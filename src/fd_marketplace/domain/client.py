# src/fd_marketplace/domain/client.py
"""Marketplace client Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real OpenSea implementation.
"""

from typing import Any, Protocol


class MarketplaceClientProtocol(Protocol):
    async def fetch_listings(self, slug: str, limit: int) -> list[dict[str, Any]]: ...

    async def fetch_fulfillment_data(
        self,
        order_hash: str,
        chain: str,
        protocol_address: str,
        fulfiller_address: str,
    ) -> Any: ...
