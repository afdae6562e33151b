# src/fd_fulfillment/api/router.py
from typing import Annotated

from fastapi import APIRouter, Depends

from src.fd_fulfillment.application import service as svc
from src.fd_fulfillment.application.schemas import FulfillmentRequest, FulfillmentResponse
from src.fd_marketplace.api.dependencies import get_marketplace_client
from src.fd_marketplace.domain.client import MarketplaceClientProtocol

router = APIRouter(prefix="/fulfillment-data", tags=["fulfillment"])


@router.post("", response_model=FulfillmentResponse)
async def create_fulfillment_data(
    req: FulfillmentRequest,
    client: Annotated[MarketplaceClientProtocol, Depends(get_marketplace_client)],
) -> FulfillmentResponse:
    return await svc.prepare_fulfillment(req, client)
