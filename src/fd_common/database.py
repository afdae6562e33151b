"""Async engine lifecycle — one bounded pool per process.

init_engine() runs at application startup, close_engine() at shutdown.
Handlers receive sessions through get_db_session(); tests override that
dependency instead of touching the engine.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from config.settings import Settings, settings

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models across modules."""

    pass


def init_engine(cfg: Settings = settings) -> AsyncEngine:
    """Create the process-wide engine and session factory (idempotent)."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        _engine = create_async_engine(
            cfg.DATABASE_URL,
            echo=cfg.DEBUG,
            pool_size=cfg.DB_POOL_SIZE,
            max_overflow=cfg.DB_MAX_OVERFLOW,
            pool_timeout=cfg.DB_POOL_TIMEOUT_SECONDS,
            pool_recycle=cfg.DB_POOL_RECYCLE_SECONDS,
            pool_pre_ping=True,
            # asyncpg: connect timeout + per-statement timeout
            connect_args={
                "timeout": cfg.DB_CONNECT_TIMEOUT_SECONDS,
                "command_timeout": cfg.DB_QUERY_TIMEOUT_SECONDS,
            },
        )
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _engine


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise RuntimeError("Database engine not initialised; call init_engine() first")
    return _engine


async def close_engine() -> None:
    """Dispose the pool. Safe to call when the engine was never created."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: yields an AsyncSession, returned to the pool on every exit path."""
    if _session_factory is None:
        raise RuntimeError("Database engine not initialised; call init_engine() first")
    async with _session_factory() as session:
        yield session
