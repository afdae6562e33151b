"""fd_stats REST endpoints.

GET /stats/{contract}   — cached collection stats + staleness
GET /stats              — 400, contract missing
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.fd_common.database import get_db_session
from src.fd_common.errors import ValidationError
from src.fd_common.response import ApiResponse, success_response
from src.fd_stats.application.service import StatsApplicationService

router = APIRouter(prefix="/stats", tags=["stats"])

_service = StatsApplicationService()


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def stats_missing_contract() -> None:
    raise ValidationError("Contract address is required")


@router.get("/{contract}")
async def get_collection_stats(
    contract: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.get_stats(db, contract)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
