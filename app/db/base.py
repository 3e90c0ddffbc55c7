"""Declarative base, async engine and session factory.

Production runs on PostgreSQL (asyncpg); development and tests use a local
SQLite file (aiosqlite). Tables are created from the models at startup.
"""

import structlog
from sqlalchemy import MetaData, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings

logger = structlog.get_logger(__name__)

# Stable constraint names so both backends produce the same schema
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_kwargs(db_url: str, echo: bool) -> dict:
    if make_url(db_url).get_backend_name() == "sqlite":
        # SQLite has no server to drop idle connections
        return {"echo": echo}
    return {"echo": echo, "pool_pre_ping": True}


async def init_db(url: str | None = None) -> None:
    """Create the engine and session factory, then create missing tables.

    A second call while an engine exists is a no-op.
    """
    global _engine, _session_factory

    if _engine is not None:
        return

    settings = get_settings()
    db_url = url or settings.database_url

    _engine = create_async_engine(db_url, **_engine_kwargs(db_url, settings.debug))
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Populate Base.metadata before create_all
    import app.db.models  # noqa: F401

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(
        "database_ready",
        url=make_url(db_url).render_as_string(hide_password=True),
        tables=len(Base.metadata.tables),
    )


async def close_db() -> None:
    """Dispose of the engine and release all connections."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the configured session factory.

    Raises RuntimeError if init_db() has not been called.
    """
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _session_factory
