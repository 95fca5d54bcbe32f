import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from identity.core.container import ApplicationContainer
from identity.infrastructure.database.repositories import SqlAccountRepository
from identity.modules.accounts import (
    AccountAction,
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AuthService,
    StorageUnavailableError,
)


class TestSqlAccountRepository:
    @pytest.mark.asyncio
    async def test_create_and_find(self, session):
        repository = SqlAccountRepository(session)

        created = await repository.create("user@example.com", "$2b$04$hash")
        await session.commit()
        found = await repository.find_by_email("user@example.com")

        assert found is not None
        assert found.id == created.id
        assert found.email == "user@example.com"
        assert found.credential_hash == "$2b$04$hash"
        assert found.last_action is AccountAction.SIGNUP
        assert found.created_at is not None

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, session):
        assert await SqlAccountRepository(session).find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_ids_are_assigned_in_order(self, session):
        repository = SqlAccountRepository(session)

        first = await repository.create("a@example.com", "h1")
        second = await repository.create("b@example.com", "h2")

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_duplicate_email_hits_unique_constraint(self, session_factory):
        async with session_factory() as session:
            await SqlAccountRepository(session).create("user@example.com", "h1")
            await session.commit()

        async with session_factory() as session:
            repository = SqlAccountRepository(session)
            with pytest.raises(AccountAlreadyExistsError):
                await repository.create("user@example.com", "h2")
            # The session is usable again after the rejected insert.
            account = await repository.find_by_email("user@example.com")

        assert account.credential_hash == "h1"

    @pytest.mark.asyncio
    async def test_update_last_action(self, session):
        repository = SqlAccountRepository(session)
        created = await repository.create("user@example.com", "h1")

        await repository.update_last_action("user@example.com", AccountAction.LOGIN)
        await session.commit()
        session.expire_all()
        found = await repository.find_by_email("user@example.com")

        assert found.last_action is AccountAction.LOGIN
        assert found.credential_hash == "h1"
        assert found.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_missing_account(self, session):
        with pytest.raises(AccountNotFoundError):
            await SqlAccountRepository(session).update_last_action("nobody@example.com", AccountAction.LOGIN)

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_storage_unavailable(self):
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, ConnectionRefusedError())

        with pytest.raises(StorageUnavailableError):
            await SqlAccountRepository(session).find_by_email("user@example.com")


class TestConcurrentRegistration:
    @pytest.mark.asyncio
    async def test_one_winner_under_concurrency(self, session_factory, hasher):
        async def register(email: str) -> bool:
            async with session_factory() as session:
                service = AuthService.with_session(session, hasher)
                try:
                    await service.register({"email": email, "password": "hunter22"})
                except AccountAlreadyExistsError:
                    return False
                await session.commit()
                return True

        outcomes = await asyncio.gather(register("race@example.com"), register(" RACE@example.com "))

        assert sorted(outcomes) == [False, True]
        async with session_factory() as session:
            account = await SqlAccountRepository(session).find_by_email("race@example.com")
        assert account is not None


class TestApplicationContainer:
    @pytest.mark.asyncio
    async def test_startup_creates_schema_and_shutdown_disposes(self, settings):
        container = ApplicationContainer(settings=settings)
        await container.startup()
        assert container.hasher.rounds == settings.bcrypt_rounds

        async with container.session_factory() as session:
            assert await SqlAccountRepository(session).find_by_email("a@b.com") is None

        await container.shutdown()
        assert container.engine is None
        assert container.session_factory is None

    @pytest.mark.asyncio
    async def test_unreachable_database_fails_startup(self, settings, tmp_path):
        broken = settings.model_copy(
            update={"database": settings.database.model_copy(
                update={"url": f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'identity.db'}"}
            )}
        )
        container = ApplicationContainer(settings=broken)

        with pytest.raises(StorageUnavailableError):
            await container.startup()
        await container.shutdown()
