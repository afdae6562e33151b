"""Domain models for fd_marketplace — immutable listing value objects."""

from dataclasses import dataclass
from typing import Any

from src.fd_common.wei import parse_wei


@dataclass(frozen=True)
class Listing:
    """One marketplace sell order.

    price is the exact smallest-unit amount as a digit string; use
    price_wei for comparisons.
    """

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

    @property
    def price_wei(self) -> int:
        return int(self.price)

    @classmethod
    def from_opensea(cls, raw: dict[str, Any]) -> "Listing":
        """Build from one element of the OpenSea v2 `listings` array.

        Raises KeyError / TypeError / ValueError on an unexpected shape.
        """
        parameters = raw["protocol_data"]["parameters"]
        offer_item = parameters["offer"][0]
        current = raw["price"]["current"]
        price = parse_wei(current["value"])
        listing_type = raw.get("type")
        if listing_type is not None:
            listing_type = _require_str(raw, "type")
        return cls(
            order_hash=_require_str(raw, "order_hash"),
            chain=_require_str(raw, "chain"),
            protocol_address=_require_str(raw, "protocol_address"),
            protocol_data=raw["protocol_data"],
            nft_contract_address=_require_str(offer_item, "token"),
            token_id=str(offer_item["identifierOrCriteria"]),
            price=str(price),
            currency=_require_str(current, "currency"),
            decimals=int(current["decimals"]),
            type=listing_type,
            end_time=raw_end_time(raw),
        )


def raw_end_time(raw: dict[str, Any]) -> int:
    """Read only protocol_data.parameters.endTime from a raw listing."""
    return _parse_unix_seconds(raw["protocol_data"]["parameters"]["endTime"])


def _require_str(obj: dict[str, Any], key: str) -> str:
    value = obj[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {value!r}")
    return value


def _parse_unix_seconds(value: object) -> int:
    # Seaport encodes uint256 fields as decimal strings
    if isinstance(value, bool):
        raise ValueError(f"Invalid endTime: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValueError(f"Invalid endTime: {value!r}")
