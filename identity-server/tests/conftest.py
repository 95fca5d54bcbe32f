"""Shared fixtures: fast bcrypt, throwaway SQLite databases, in-memory repository."""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import replace
from datetime import datetime, timezone

import pytest
import pytest_asyncio

from identity.core.config import Settings
from identity.core.crypto import CredentialHasher
from identity.infrastructure.database.session import build_engine, build_session_factory, init_db
from identity.modules.accounts import (
    Account,
    AccountAction,
    AccountAlreadyExistsError,
    AccountNotFoundError,
)

TEST_ROUNDS = 4


class InMemoryAccountRepository:
    """Dict-backed repository with the same uniqueness guarantee as the table."""

    def __init__(self) -> None:
        self.accounts: dict[str, Account] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> Account | None:
        return self.accounts.get(email)

    async def create(
        self,
        email: str,
        credential_hash: str,
        action: AccountAction = AccountAction.SIGNUP,
    ) -> Account:
        async with self._lock:
            if email in self.accounts:
                raise AccountAlreadyExistsError()
            account = Account(
                id=next(self._ids),
                email=email,
                credential_hash=credential_hash,
                last_action=action,
                created_at=datetime.now(timezone.utc),
            )
            self.accounts[email] = account
            return account

    async def update_last_action(self, email: str, action: AccountAction) -> None:
        account = self.accounts.get(email)
        if account is None:
            raise AccountNotFoundError()
        self.accounts[email] = replace(account, last_action=action)


@pytest.fixture
def hasher() -> CredentialHasher:
    return CredentialHasher(rounds=TEST_ROUNDS)


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        database={"url": f"sqlite+aiosqlite:///{tmp_path / 'identity.db'}"},
        security={"bcrypt_rounds": TEST_ROUNDS},
    )


@pytest_asyncio.fixture
async def engine(settings):
    engine = build_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
