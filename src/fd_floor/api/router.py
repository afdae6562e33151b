"""fd_floor REST endpoints.

GET /floor-price/{slug}   — cheapest non-expired listing for a collection
GET /floor-price          — 400, slug missing
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.fd_common.errors import ValidationError
from src.fd_floor.application.schemas import FloorPriceResponse
from src.fd_floor.application.service import FloorPriceApplicationService
from src.fd_marketplace.api.dependencies import get_marketplace_client
from src.fd_marketplace.domain.client import MarketplaceClientProtocol

router = APIRouter(prefix="/floor-price", tags=["floor-price"])

_service = FloorPriceApplicationService()


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def floor_price_missing_slug() -> None:
    raise ValidationError("Collection slug is required")


@router.get("/{slug}", response_model=FloorPriceResponse)
async def get_floor_price(
    slug: str,
    client: Annotated[MarketplaceClientProtocol, Depends(get_marketplace_client)],
) -> FloorPriceResponse:
    return await _service.get_floor_price(client, slug)
