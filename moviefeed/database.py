"""Async database engine and session factory."""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from moviefeed.config import settings
from moviefeed.domain.models import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.database_url, echo=settings.database_echo)
async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


async def dispose_db() -> None:
    """Close pooled connections."""
    await engine.dispose()
