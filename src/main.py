"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from config.settings import settings
from src.fd_common.database import close_engine, init_engine
from src.fd_common.errors import AppError, ValidationError
from src.fd_common.http_client import close_http_client, init_http_client
from src.fd_common.response import error_response
from src.fd_floor.api.router import router as floor_router
from src.fd_fulfillment.api.router import router as fulfillment_router
from src.fd_gateway.middleware.request_log import RequestLogMiddleware
from src.fd_stats.api.router import router as stats_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: create pool + HTTP client, verify DB. Shutdown: dispose both."""
    engine = init_engine()
    init_http_client()
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        yield
    finally:
        await close_http_client()
        await close_engine()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


def _render(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, exc.details, exc.extra)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path,
                     exc.message, exc.details)
    return _render(request, exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # loc is ("body", "<field>") for field errors, ("body", <pos>) for bad JSON
    fields = sorted(
        {
            err["loc"][-1]
            for err in exc.errors()
            if len(err.get("loc", ())) > 1 and isinstance(err["loc"][-1], str)
        }
    )
    message = "Missing or invalid fields: " + ", ".join(fields) if fields else "Invalid request"
    return _render(request, ValidationError(message))


app.include_router(floor_router, prefix="/api/v1")
app.include_router(fulfillment_router, prefix="/api/v1")
app.include_router(stats_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
