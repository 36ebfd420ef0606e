"""Database initialization utilities.

Run ``python -m friggsys.infrastructure.persistence.sqlalchemy.init_db`` to
create missing tables, or pass ``--drop`` to reset the schema first.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from friggsys.infrastructure.persistence.sqlalchemy.models import Base
from friggsys_config.logging_setup import configure_logging
from friggsys_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Optional[Settings] = None) -> AsyncEngine:
    """Create the async engine for the configured database."""
    settings = settings or get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    logger.warning("Dropping all database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _main(drop: bool) -> None:
    engine = create_engine_from_settings()
    try:
        if drop:
            await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(_main(drop="--drop" in sys.argv[1:]))
