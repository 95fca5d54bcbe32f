"""Database session dependency."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from identity.core.container import ApplicationContainer
from identity.infrastructure.database.session import session_scope


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    container = get_container(request)
    if container.session_factory is None:
        raise RuntimeError("Database session factory is not initialised")
    async with session_scope(container.session_factory) as session:
        yield session


__all__ = ["get_container", "get_db_session"]
