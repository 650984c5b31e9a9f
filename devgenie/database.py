"""Database engine and session handling.

The engine is created lazily from settings so importing the app does not
require DATABASE_URL; tests swap the session dependency for an in-memory one.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import get_settings
from .models import Base

_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Create the engine on first use (fails fast if DATABASE_URL is not set)."""
    global _engine, _session_maker
    if _engine is None:
        _engine = create_async_engine(get_settings().database_url, echo=False)
        _session_maker = async_sessionmaker(_engine, expire_on_commit=False)
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    get_engine()
    assert _session_maker is not None
    return _session_maker


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get async database session."""
    async with get_session_maker()() as session:
        yield session


async def init_models(engine: AsyncEngine | None = None) -> None:
    """Create missing tables."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_maker = None
