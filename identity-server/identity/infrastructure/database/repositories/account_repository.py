"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from identity.infrastructure.database.models import User as UserModel
from identity.modules.accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    StorageUnavailableError,
)
from identity.modules.accounts.models import Account, AccountAction
from identity.modules.accounts.repository import AccountRepository

logger = logging.getLogger(__name__)


class SqlAccountRepository(AccountRepository):
    """Account repository backed by the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Account | None:
        stmt = select(UserModel).where(UserModel.email == email).limit(1)
        try:
            result = await self._session.execute(stmt)
        except DBAPIError as exc:
            logger.error("Account lookup failed: %s", exc)
            raise StorageUnavailableError() from exc
        return self._to_domain(result.scalar_one_or_none())

    async def create(
        self,
        email: str,
        credential_hash: str,
        action: AccountAction = AccountAction.SIGNUP,
    ) -> Account:
        model = UserModel(
            email=email,
            password_hash=credential_hash,
            action_type=action,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # The unique index on email decides concurrent registrations.
            await self._session.rollback()
            raise AccountAlreadyExistsError() from exc
        except DBAPIError as exc:
            await self._session.rollback()
            logger.error("Account insert failed: %s", exc)
            raise StorageUnavailableError() from exc

        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_last_action(self, email: str, action: AccountAction) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.email == email)
            .values(action_type=action)
        )
        try:
            result = await self._session.execute(stmt)
        except DBAPIError as exc:
            logger.error("Account update failed: %s", exc)
            raise StorageUnavailableError() from exc
        if result.rowcount == 0:
            raise AccountNotFoundError()

    @staticmethod
    def _to_domain(model: UserModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            email=model.email,
            credential_hash=model.password_hash,
            last_action=AccountAction(model.action_type),
            created_at=model.created_at,
        )
