"""Domain models for accounts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


class AccountAction(str, enum.Enum):
    """Most recent flow that touched an account."""

    LOGIN = "login"
    SIGNUP = "signup"


@dataclass(slots=True, frozen=True)
class Account:
    id: int
    email: str
    credential_hash: str = field(repr=False)
    last_action: AccountAction = AccountAction.SIGNUP
    created_at: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class Credentials:
    """Normalized email and the plaintext password it was submitted with."""

    email: str
    password: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class AuthenticatedAccount:
    id: int
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "AuthenticatedAccount":
        return cls(id=account.id, email=account.email)


@dataclass(slots=True, frozen=True)
class RegistrationResult:
    email: str
    created: bool = True
