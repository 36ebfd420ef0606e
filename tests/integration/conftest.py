"""Fixtures for SQLite-backed integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from friggsys.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from friggsys.infrastructure.persistence.sqlalchemy.init_db import create_tables


@pytest_asyncio.fixture
async def engine():
    """Create an in-memory SQLite engine with the schema in place."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def user_repo(session):
    """Create UserRepository instance."""
    return UserRepositorySQLAlchemy(session)
