"""StatsRepository — concrete implementation of StatsRepositoryProtocol.

Raw text() SQL against the collections table; read-only.
collection_owner is stored lower-cased by the updater, so callers pass a
case-folded address.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.fd_stats.domain.models import StatsSnapshot

_GET_STATS_SQL = text("""
    SELECT collection_owner,
           total_supply, listed_count,
           floor_price, market_cap,
           opensea_data_updated_at,
           chain_id
    FROM collections
    WHERE collection_owner = :contract
    LIMIT 1
""")


def _row_to_snapshot(row: object) -> StatsSnapshot:
    return StatsSnapshot(
        contract=row.collection_owner,  # type: ignore[attr-defined]
        total_supply=row.total_supply,  # type: ignore[attr-defined]
        listed_count=row.listed_count,  # type: ignore[attr-defined]
        floor_price=row.floor_price,  # type: ignore[attr-defined]
        market_cap=row.market_cap,  # type: ignore[attr-defined]
        last_updated_at=row.opensea_data_updated_at,  # type: ignore[attr-defined]
        chain_id=row.chain_id,  # type: ignore[attr-defined]
    )


class StatsRepository:
    async def get_stats_by_contract(
        self, db: AsyncSession, contract: str
    ) -> StatsSnapshot | None:
        result = await db.execute(_GET_STATS_SQL, {"contract": contract})
        row = result.fetchone()
        return _row_to_snapshot(row) if row else None
