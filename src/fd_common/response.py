"""Unified API response wrappers.

Success bodies always carry "success": true; endpoint-specific members sit
beside it (floor price, fulfillment) or under "data" (stats).

Error bodies:
{
    "success": false,
    "code": 2001,            // see errors.py for ranges
    "error": "No active listings found",
    "details": null,         // raw upstream body / underlying message
    "timestamp": "...",
    "request_id": "...",
    ...                      // endpoint extras, e.g. "listings": []
}
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    success: bool = True
    data: Any = None
    timestamp: str = Field(default_factory=_now_iso)
    request_id: str = Field(default_factory=_request_id)


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool = False
    code: int
    error: str
    details: str | None = None
    timestamp: str = Field(default_factory=_now_iso)
    request_id: str = Field(default_factory=_request_id)


def success_response(data: Any = None) -> ApiResponse:
    return ApiResponse(success=True, data=data)


def error_response(
    code: int,
    message: str,
    details: str | None = None,
    extra: dict[str, Any] | None = None,
) -> ErrorResponse:
    return ErrorResponse(code=code, error=message, details=details, **(extra or {}))
