"""Unit tests for StatsApplicationService using mock repository."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.fd_common.errors import (
    CollectionStatsNotFoundError,
    InternalError,
    ValidationError,
)
from src.fd_stats.application.service import StatsApplicationService, normalize_contract
from src.fd_stats.domain.models import StatsSnapshot

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
CONTRACT = "0xed5af388653567af2f388e6224dc7c4b3241c544"


def _make_snapshot(**kwargs) -> StatsSnapshot:
    defaults = dict(
        contract=CONTRACT, total_supply=10000, listed_count=312,
        floor_price=Decimal("0.5"), market_cap=Decimal("5000"),
        last_updated_at=NOW - timedelta(seconds=300), chain_id=1,
    )
    defaults.update(kwargs)
    return StatsSnapshot(**defaults)


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def mock_repo():
    return MagicMock()


class TestNormalizeContract:
    def test_case_folds_and_strips(self) -> None:
        assert normalize_contract("  0xED5AF388653567Af2F388E6224dC7C4b3241C544 ") == CONTRACT

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_validation_error(self, value) -> None:
        with pytest.raises(ValidationError):
            normalize_contract(value)


class TestGetStats:
    @pytest.mark.asyncio
    async def test_fresh_snapshot(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(return_value=_make_snapshot())
        svc = StatsApplicationService(repo=mock_repo)

        out = await svc.get_stats(db, CONTRACT, now=NOW)

        assert out.total_supply == 10000
        assert out.listed_count == 312
        assert out.floor_price == "500000000000000000"
        assert out.market_cap == "5000000000000000000000"
        assert out.is_stale is False
        assert out.age_seconds == 300
        assert out.chain_id == 1
        assert out.network_name == "Ethereum Mainnet"
        assert out.currency == "ETH"
        assert out.last_updated == (NOW - timedelta(seconds=300)).isoformat()

    @pytest.mark.asyncio
    async def test_looks_up_case_folded_address(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(return_value=_make_snapshot())
        svc = StatsApplicationService(repo=mock_repo)

        await svc.get_stats(db, CONTRACT.upper().replace("0X", "0x"), now=NOW)

        mock_repo.get_stats_by_contract.assert_awaited_once_with(db, CONTRACT)

    @pytest.mark.asyncio
    async def test_age_1199_is_fresh(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(
            return_value=_make_snapshot(last_updated_at=NOW - timedelta(seconds=1199))
        )
        out = await StatsApplicationService(repo=mock_repo).get_stats(db, CONTRACT, now=NOW)
        assert out.is_stale is False
        assert out.age_seconds == 1199

    @pytest.mark.asyncio
    async def test_age_1201_is_stale(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(
            return_value=_make_snapshot(last_updated_at=NOW - timedelta(seconds=1201))
        )
        out = await StatsApplicationService(repo=mock_repo).get_stats(db, CONTRACT, now=NOW)
        assert out.is_stale is True
        assert out.age_seconds == 1201

    @pytest.mark.asyncio
    async def test_never_updated_is_stale(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(
            return_value=_make_snapshot(last_updated_at=None)
        )
        out = await StatsApplicationService(repo=mock_repo).get_stats(db, CONTRACT, now=NOW)
        assert out.is_stale is True
        assert out.age_seconds is None
        assert out.last_updated is None

    @pytest.mark.asyncio
    async def test_null_amounts_rescale_to_zero(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(
            return_value=_make_snapshot(floor_price=None, market_cap=None)
        )
        out = await StatsApplicationService(repo=mock_repo).get_stats(db, CONTRACT, now=NOW)
        assert out.floor_price == "0"
        assert out.market_cap == "0"

    @pytest.mark.asyncio
    async def test_unknown_chain_has_no_display_fields(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(
            return_value=_make_snapshot(chain_id=424242)
        )
        out = await StatsApplicationService(repo=mock_repo).get_stats(db, CONTRACT, now=NOW)
        assert out.chain_id == 424242
        assert out.network_name is None
        assert out.currency is None

    @pytest.mark.asyncio
    async def test_not_found(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(return_value=None)
        svc = StatsApplicationService(repo=mock_repo)

        with pytest.raises(CollectionStatsNotFoundError):
            await svc.get_stats(db, CONTRACT, now=NOW)

    @pytest.mark.asyncio
    async def test_blank_contract_skips_lookup(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock()
        svc = StatsApplicationService(repo=mock_repo)

        with pytest.raises(ValidationError):
            await svc.get_stats(db, "  ", now=NOW)

        mock_repo.get_stats_by_contract.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_database_fault_is_internal_error(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection lost"))
        )
        svc = StatsApplicationService(repo=mock_repo)

        with pytest.raises(InternalError) as exc_info:
            await svc.get_stats(db, CONTRACT, now=NOW)

        assert "connection lost" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_query_timeout_is_internal_error(self, db, mock_repo):
        mock_repo.get_stats_by_contract = AsyncMock(side_effect=TimeoutError())
        svc = StatsApplicationService(repo=mock_repo)

        with pytest.raises(InternalError):
            await svc.get_stats(db, CONTRACT, now=NOW)
