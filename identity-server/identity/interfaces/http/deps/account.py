"""Account related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from identity.core.container import ApplicationContainer
from identity.infrastructure.database.repositories.account_repository import SqlAccountRepository
from identity.modules.accounts.service import AuthService

from .database import get_container, get_db_session


def get_account_repository(db: AsyncSession = Depends(get_db_session)) -> SqlAccountRepository:
    return SqlAccountRepository(db)


def get_auth_service(
    repository: SqlAccountRepository = Depends(get_account_repository),
    container: ApplicationContainer = Depends(get_container),
) -> AuthService:
    return AuthService(repository, container.hasher)


__all__ = [
    "get_account_repository",
    "get_auth_service",
]
