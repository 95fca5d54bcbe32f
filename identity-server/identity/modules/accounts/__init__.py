"""Account domain services and models."""

from .models import (
    Account,
    AccountAction,
    AuthenticatedAccount,
    Credentials,
    RegistrationResult,
)
from .service import AuthService
from .validation import MIN_PASSWORD_LENGTH, normalize_email, validate_credentials
from .exceptions import (
    AccountError,
    CredentialValidationError,
    InvalidPayloadError,
    WeakCredentialError,
    AccountAlreadyExistsError,
    InvalidCredentialsError,
    AccountNotFoundError,
    StorageUnavailableError,
)

__all__ = [
    "Account",
    "AccountAction",
    "AuthenticatedAccount",
    "Credentials",
    "RegistrationResult",
    "AuthService",
    "MIN_PASSWORD_LENGTH",
    "normalize_email",
    "validate_credentials",
    "AccountError",
    "CredentialValidationError",
    "InvalidPayloadError",
    "WeakCredentialError",
    "AccountAlreadyExistsError",
    "InvalidCredentialsError",
    "AccountNotFoundError",
    "StorageUnavailableError",
]
