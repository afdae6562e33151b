"""Fulfillment preparation — one outbound call, payload passed through.

Works for any known order, not only the floor listing.
"""

import logging

from src.fd_fulfillment.application.schemas import FulfillmentRequest, FulfillmentResponse
from src.fd_marketplace.domain.client import MarketplaceClientProtocol

logger = logging.getLogger(__name__)


async def prepare_fulfillment(
    req: FulfillmentRequest, client: MarketplaceClientProtocol
) -> FulfillmentResponse:
    data = await client.fetch_fulfillment_data(
        order_hash=req.order_hash,
        chain=req.chain,
        protocol_address=req.protocol_address,
        fulfiller_address=req.fulfiller_address,
    )
    logger.info("Fulfillment data generated for order %s", req.order_hash)
    return FulfillmentResponse(fulfillment_data=data)
