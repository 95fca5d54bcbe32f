"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol

from .models import Account, AccountAction


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence.

    Emails passed in are already normalized. ``create`` must rely on the
    store's unique constraint and raise ``AccountAlreadyExistsError`` when it
    fires, rather than checking for an existing row first.
    """

    async def find_by_email(self, email: str) -> Account | None:
        ...

    async def create(
        self,
        email: str,
        credential_hash: str,
        action: AccountAction = AccountAction.SIGNUP,
    ) -> Account:
        ...

    async def update_last_action(self, email: str, action: AccountAction) -> None:
        ...
