"""Pydantic schemas for fd_floor API responses.

Wire format is camelCase (orderHash, totalListings, ...) to match what
wallet-side fulfillment code already consumes; Python attributes stay
snake_case. price is always a digit string, never a JSON number.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.fd_floor.domain.models import FloorResult
from src.fd_marketplace.domain.models import Listing


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListingOut(_CamelModel):
    order_hash: str
    chain: str
    protocol_address: str
    protocol_data: dict[str, Any]
    nft_contract_address: str
    token_id: str
    price: str
    currency: str
    decimals: int
    type: str | None
    end_time: int

    @classmethod
    def from_domain(cls, listing: Listing) -> "ListingOut":
        return cls(
            order_hash=listing.order_hash,
            chain=listing.chain,
            protocol_address=listing.protocol_address,
            protocol_data=listing.protocol_data,
            nft_contract_address=listing.nft_contract_address,
            token_id=listing.token_id,
            price=listing.price,
            currency=listing.currency,
            decimals=listing.decimals,
            type=listing.type,
            end_time=listing.end_time,
        )


class FloorPriceResponse(_CamelModel):
    success: bool = True
    listing: ListingOut
    total_listings: int
    valid_listings: int

    @classmethod
    def from_result(cls, result: FloorResult) -> "FloorPriceResponse":
        return cls(
            listing=ListingOut.from_domain(result.listing),
            total_listings=result.total_listings,
            valid_listings=result.valid_listings,
        )
