"""Utilities for password hashing and verification."""

from __future__ import annotations

import asyncio

import bcrypt

DEFAULT_ROUNDS = 12
MIN_ROUNDS = 4
MAX_ROUNDS = 31
# bcrypt ignores input past 72 bytes; newer releases reject it outright.
MAX_SECRET_BYTES = 72
_DUMMY_SECRET = "identity-server-timing-dummy"


def _encode(secret: str) -> bytes:
    return secret.encode("utf-8")[:MAX_SECRET_BYTES]


class CredentialHasher:
    """One-way bcrypt hashing with a configurable cost factor.

    Every call to :meth:`hash` draws a fresh salt, so hashing the same secret
    twice yields two different strings that both verify.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}")
        self._rounds = rounds
        # Built eagerly so a lookup miss costs one verify, same as a wrong password.
        self._dummy_hash = self.hash(_DUMMY_SECRET)

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def dummy_hash(self) -> str:
        """A valid hash of a fixed secret, checked against when there is no stored hash."""
        return self._dummy_hash

    def hash(self, secret: str) -> str:
        """Hash plain text secret using bcrypt."""
        return bcrypt.hashpw(_encode(secret), bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, secret: str, hashed: str) -> bool:
        """Verify a plain text secret against a stored bcrypt hash."""
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(_encode(secret), hashed.encode("utf-8"))
        except ValueError:
            return False

    async def hash_async(self, secret: str) -> str:
        return await asyncio.to_thread(self.hash, secret)

    async def verify_async(self, secret: str, hashed: str) -> bool:
        return await asyncio.to_thread(self.verify, secret, hashed)


__all__ = ["CredentialHasher", "DEFAULT_ROUNDS"]
