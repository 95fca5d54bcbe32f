"""Normalization and shape checks for inbound credentials."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidPayloadError, WeakCredentialError
from .models import Credentials

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_credentials(payload: Any) -> Credentials:
    """Turn a raw request payload into normalized :class:`Credentials`.

    Raises ``InvalidPayloadError`` when ``email`` or ``password`` is missing,
    not a string, or the email is blank after trimming, and
    ``WeakCredentialError`` when the password is too short.
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError()

    email = payload.get("email")
    password = payload.get("password")
    if not isinstance(email, str) or not isinstance(password, str):
        raise InvalidPayloadError()

    normalized = normalize_email(email)
    if not normalized:
        raise InvalidPayloadError()
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakCredentialError()

    return Credentials(email=normalized, password=password)


__all__ = ["MIN_PASSWORD_LENGTH", "normalize_email", "validate_credentials"]
