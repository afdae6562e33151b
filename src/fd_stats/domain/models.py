"""Domain models for fd_stats — pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class StatsSnapshot:
    """One collections row as materialized by the external stats updater.

    floor_price / market_cap are human-unit decimals (e.g. 0.5 ETH).
    """

    contract: str
    total_supply: int | None
    listed_count: int | None
    floor_price: Decimal | None
    market_cap: Decimal | None
    last_updated_at: datetime | None
    chain_id: int | None


@dataclass(frozen=True)
class Freshness:
    age_seconds: float | None   # None when never updated
    is_stale: bool
