# src/fd_fulfillment/application/schemas.py
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Seaport 1.6 — used when the caller does not name a protocol instance.
SEAPORT_V1_6_ADDRESS = "0x0000000000000068F116a894984e2DB1123eB395"


class FulfillmentRequest(BaseModel):
    """Body of POST /fulfillment-data.

    fulfiller_address is the wallet that will submit the trade; it need not
    be the caller. protocol_address defaults to Seaport 1.6 here and nowhere
    else.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_hash: str = Field(min_length=1)
    chain: str = Field(min_length=1)
    fulfiller_address: str = Field(min_length=1)
    protocol_address: str = SEAPORT_V1_6_ADDRESS

    @field_validator("order_hash", "chain", "fulfiller_address", mode="before")
    @classmethod
    def strip_required(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("protocol_address", mode="before")
    @classmethod
    def default_protocol_address(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return SEAPORT_V1_6_ADDRESS
        return v.strip() if isinstance(v, str) else v


class FulfillmentResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    fulfillment_data: Any
