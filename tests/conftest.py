"""Shared test fixtures."""

# ruff: noqa: E402  -- settings require the API key at import time

import os

os.environ.setdefault("OPENSEA_API_KEY", "test-api-key")

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app

NOW = 1_800_000_000
COLLECTION_CONTRACT = "0xed5af388653567af2f388e6224dc7c4b3241c544"


def make_raw_listing(
    order_hash: str = "0xorder1",
    price: Any = "1000000000000000000",
    end_time: Any = NOW + 3600,
    token_id: str = "1234",
    **overrides: Any,
) -> dict[str, Any]:
    """One element of an OpenSea v2 `listings` array."""
    raw: dict[str, Any] = {
        "order_hash": order_hash,
        "chain": "ethereum",
        "type": "basic",
        "price": {
            "current": {"currency": "ETH", "decimals": 18, "value": price},
        },
        "protocol_data": {
            "parameters": {
                "offerer": "0x1111111111111111111111111111111111111111",
                "offer": [
                    {
                        "itemType": 2,
                        "token": COLLECTION_CONTRACT,
                        "identifierOrCriteria": token_id,
                        "startAmount": "1",
                        "endAmount": "1",
                    }
                ],
                "consideration": [],
                "startTime": str(NOW - 3600),
                "endTime": end_time,
            },
            "signature": None,
        },
        "protocol_address": "0x0000000000000068f116a894984e2db1123eb395",
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def raw_listing():
    """Factory fixture: raw_listing(order_hash=..., price=..., end_time=...)."""
    return make_raw_listing


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints.

    ASGITransport does not run the lifespan, so no pool or marketplace
    client is created; tests override the dependencies they need.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
