"""Pydantic schemas for fd_stats API responses.

floor_price / market_cap are smallest-unit integer strings (18 decimals),
the unit wallet code works in. age_seconds is floored to whole seconds and
is null when the collection was never synced.
"""

import math

from pydantic import BaseModel

from src.fd_common.chains import get_chain_info
from src.fd_common.wei import to_smallest_unit
from src.fd_stats.domain.models import Freshness, StatsSnapshot


class CollectionStatsOut(BaseModel):
    total_supply: int | None
    listed_count: int | None
    floor_price: str
    market_cap: str
    last_updated: str | None
    is_stale: bool
    age_seconds: int | None
    chain_id: int | None
    network_name: str | None
    currency: str | None

    @classmethod
    def from_domain(cls, s: StatsSnapshot, freshness: Freshness) -> "CollectionStatsOut":
        chain = get_chain_info(s.chain_id)
        return cls(
            total_supply=s.total_supply,
            listed_count=s.listed_count,
            floor_price=to_smallest_unit(s.floor_price),
            market_cap=to_smallest_unit(s.market_cap),
            last_updated=s.last_updated_at.isoformat() if s.last_updated_at else None,
            is_stale=freshness.is_stale,
            age_seconds=(
                math.floor(freshness.age_seconds)
                if freshness.age_seconds is not None
                else None
            ),
            chain_id=s.chain_id,
            network_name=chain.network_name if chain else None,
            currency=chain.currency if chain else None,
        )
