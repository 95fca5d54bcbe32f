"""Domain services for registration and login."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from identity.core.crypto import CredentialHasher

from .exceptions import AccountAlreadyExistsError, InvalidCredentialsError, InvalidPayloadError
from .models import AccountAction, AuthenticatedAccount, RegistrationResult
from .repository import AccountRepository
from .validation import normalize_email, validate_credentials

logger = logging.getLogger(__name__)


class AuthService:
    """Encapsulates the register and login use cases."""

    def __init__(self, repository: AccountRepository, hasher: CredentialHasher) -> None:
        self._repository = repository
        self._hasher = hasher

    @classmethod
    def with_session(cls, session: AsyncSession, hasher: CredentialHasher) -> "AuthService":
        # Imported lazily, the SQL repository imports this package.
        from identity.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session), hasher)

    async def register(self, payload: Any) -> RegistrationResult:
        credentials = validate_credentials(payload)
        credential_hash = await self._hasher.hash_async(credentials.password)
        try:
            account = await self._repository.create(
                credentials.email,
                credential_hash,
                AccountAction.SIGNUP,
            )
        except AccountAlreadyExistsError:
            logger.info("Registration rejected, account already exists: %s", credentials.email)
            raise

        logger.info("Account %s created", account.id)
        return RegistrationResult(email=account.email)

    async def login(self, payload: Any) -> AuthenticatedAccount:
        credentials = validate_credentials(payload)
        account = await self._repository.find_by_email(credentials.email)
        if account is None:
            await self._hasher.verify_async(credentials.password, self._hasher.dummy_hash)
            logger.info("Login failed for %s", credentials.email)
            raise InvalidCredentialsError()

        if not await self._hasher.verify_async(credentials.password, account.credential_hash):
            logger.info("Login failed for %s", credentials.email)
            raise InvalidCredentialsError()

        await self._repository.update_last_action(account.email, AccountAction.LOGIN)
        return AuthenticatedAccount.from_account(account)

    async def record_action(self, email: str, action: AccountAction) -> None:
        """Set the action marker of an existing account; the credential hash is untouched."""
        try:
            action = AccountAction(action)
        except ValueError as exc:
            raise InvalidPayloadError() from exc
        await self._repository.update_last_action(normalize_email(email), action)

