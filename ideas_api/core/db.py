import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
)

from ideas_api.db.base import Base

logger = logging.getLogger(__name__)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the process-wide async engine"""
    return create_async_engine(database_url, future=True, echo=echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory for the engine; loaded objects stay usable after commit"""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """Create missing tables"""
    # Register models on Base.metadata
    import ideas_api.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is ready")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency yielding a session bound to the application's engine"""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session
