"""Async engine, session factory and the request-scoped session."""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import settings
from .models.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **options) -> AsyncEngine:
    """Create an async engine for ``database_url``.

    Pool sizing is only applied to server databases; SQLite engines use
    whatever pool the caller passes (tests use a StaticPool).
    """
    if make_url(database_url).get_backend_name() != "sqlite":
        options.setdefault("pool_size", settings.db_pool_size)
        options.setdefault("max_overflow", settings.db_max_overflow)
    return create_async_engine(
        database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        **options,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay usable after commit; relationships are refreshed explicitly
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine: AsyncEngine = build_engine(settings.database_url)
AsyncSessionLocal = build_session_factory(engine)


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """One unit of work: commit when the block succeeds, roll back otherwise."""
    async with (factory or AsyncSessionLocal)() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency to get database session.

    Yields:
        AsyncSession: Session shared by every repository used in the request

    Example:
        @router.get("/jobs")
        async def all_jobs(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Job))
            return result.scalars().all()
    """
    async with session_scope() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create the companies, recruiters, jobs and association tables.

    Existing tables are left as they are.
    """
    # Registers every mapped class on Base.metadata
    from .models import Company, Job, Recruiter  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


async def close_db() -> None:
    """Dispose the engine and close all pooled connections."""
    await engine.dispose()
