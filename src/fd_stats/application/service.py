"""StatsApplicationService — cached collection stats with freshness.

Read-only; no marketplace call. The caller (router) passes the db session,
which is returned to the pool by the session dependency on every exit path.
"""

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.fd_common.datetime_utils import utc_now
from src.fd_common.errors import (
    CollectionStatsNotFoundError,
    InternalError,
    ValidationError,
)
from src.fd_stats.application.schemas import CollectionStatsOut
from src.fd_stats.domain.freshness import classify_freshness
from src.fd_stats.domain.repository import StatsRepositoryProtocol
from src.fd_stats.infrastructure.persistence import StatsRepository

logger = logging.getLogger(__name__)


def normalize_contract(contract: str | None) -> str:
    """Case-fold an address; collection_owner is stored lower-case."""
    if contract is None or not contract.strip():
        raise ValidationError("Contract address is required")
    return contract.strip().lower()


class StatsApplicationService:
    def __init__(self, repo: StatsRepositoryProtocol | None = None) -> None:
        self._repo: StatsRepositoryProtocol = repo or StatsRepository()

    async def get_stats(
        self,
        db: AsyncSession,
        contract: str,
        now: datetime | None = None,
    ) -> CollectionStatsOut:
        key = normalize_contract(contract)
        try:
            snapshot = await self._repo.get_stats_by_contract(db, key)
        except (SQLAlchemyError, TimeoutError, OSError) as exc:
            logger.error("Stats lookup failed for %s: %r", key, exc)
            raise InternalError(
                "Failed to load collection stats", cause=str(exc) or repr(exc)
            ) from exc
        if snapshot is None:
            raise CollectionStatsNotFoundError(key)

        freshness = classify_freshness(snapshot.last_updated_at, now or utc_now())
        if freshness.is_stale:
            logger.info("Stale stats for %s (age=%s)", key, freshness.age_seconds)
        try:
            return CollectionStatsOut.from_domain(snapshot, freshness)
        except ValueError as exc:
            raise InternalError(
                "Failed to load collection stats", cause=str(exc)
            ) from exc
