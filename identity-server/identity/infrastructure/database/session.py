"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from identity.core.config import Settings
from identity.modules.accounts.exceptions import StorageUnavailableError

from .base import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database.echo or settings.debug,
        "future": True,
        "pool_pre_ping": True,
    }
    # SQLite uses a static or singleton pool that rejects sizing arguments.
    if not settings.database_url.startswith("sqlite"):
        if settings.database.pool_size is not None:
            engine_kwargs["pool_size"] = settings.database.pool_size
        if settings.database.max_overflow is not None:
            engine_kwargs["max_overflow"] = settings.database.max_overflow

    return create_async_engine(settings.database_url, **engine_kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Yield a session that commits on success and rolls back on any error."""
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except (OperationalError, DBAPIError) as exc:
            await session.rollback()
            raise StorageUnavailableError() from exc
        except Exception:
            await session.rollback()
            raise


async def commit_session(session: AsyncSession) -> None:
    """Commit the session, mapping driver failures to ``StorageUnavailableError``."""
    try:
        await session.commit()
    except DBAPIError as exc:
        logger.error("Commit failed: %s", exc)
        await session.rollback()
        raise StorageUnavailableError() from exc


async def init_db(engine: AsyncEngine) -> None:
    """Create database tables in development mode (migrations preferred)."""
    # Imported for its side effect of registering tables on Base.metadata.
    from identity.infrastructure.database import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OperationalError, DBAPIError, OSError) as exc:
        logger.error("Failed to initialise database: %s", exc)
        raise StorageUnavailableError() from exc
