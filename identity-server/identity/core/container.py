"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from identity.core.config import Settings
from identity.core.crypto import CredentialHasher
from identity.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    init_db,
)


@dataclass(slots=True)
class ApplicationContainer:
    """Process-wide resources, created once at startup and disposed on shutdown."""

    settings: Settings
    hasher: CredentialHasher = field(init=False)
    engine: AsyncEngine | None = field(default=None, init=False)
    session_factory: async_sessionmaker[AsyncSession] | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.hasher = CredentialHasher(self.settings.bcrypt_rounds)

    def init_infrastructure(self) -> None:
        """Ensure the database engine and its session factory exist."""
        if self.engine is None:
            self.engine = build_engine(self.settings)
            self.session_factory = build_session_factory(self.engine)

    async def startup(self) -> None:
        self.init_infrastructure()
        assert self.engine is not None  # for mypy
        await init_db(self.engine)

    async def shutdown(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
        self.engine = None
        self.session_factory = None


__all__ = ["ApplicationContainer"]
