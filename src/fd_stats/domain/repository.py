# src/fd_stats/domain/repository.py
"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.fd_stats.domain.models import StatsSnapshot


class StatsRepositoryProtocol(Protocol):
    async def get_stats_by_contract(
        self,
        db: AsyncSession,
        contract: str,
    ) -> StatsSnapshot | None: ...
