"""Results store: async engine, sessions and schema creation."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from functools import lru_cache

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from neuro_score.config import get_settings
from neuro_score.core.models import Base

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    return get_settings().database_url


@lru_cache
def _get_engine() -> AsyncEngine:
    url = make_url(get_database_url())
    options = {"pool_pre_ping": True, "echo": get_settings().debug_mode}
    # SQLite has no server-side pool to size.
    if url.get_backend_name() != "sqlite":
        options.update(pool_size=5, max_overflow=10)
    return create_async_engine(url, **options)


@lru_cache
def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(_get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; commits on success so inserts are only kept whole."""
    async with _get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create the results table if it does not exist."""
    engine = _get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Results store ready at %s", engine.url.render_as_string(hide_password=True))


async def close_db() -> None:
    """Dispose of the engine's connections at shutdown."""
    if _get_engine.cache_info().currsize:
        await _get_engine().dispose()
        _get_session_factory.cache_clear()
        _get_engine.cache_clear()
