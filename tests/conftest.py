"""Shared test fixtures for all test groups."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base


@pytest.fixture
def db_url(tmp_path) -> str:
    """Per-test SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
async def engine(db_url: str) -> AsyncEngine:
    """Create the test engine and tables in the pytest-asyncio event loop.

    Also installs the global session factory so code that calls
    get_session_factory() directly shares this database.
    """
    import app.db.base as db_mod

    engine = create_async_engine(db_url, echo=False)

    # Import all models so metadata is populated
    import app.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    db_mod._engine = engine
    db_mod._session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    yield engine

    db_mod._engine = None
    db_mod._session_factory = None
    await engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncSession:
    """Async session bound to the pytest-asyncio event loop."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
