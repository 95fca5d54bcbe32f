"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""

    message = "Account error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class CredentialValidationError(AccountError):
    """Raised when inbound credentials fail shape or strength checks."""


class InvalidPayloadError(CredentialValidationError):
    """Raised when email or password is missing, mistyped or blank."""

    message = "Invalid payload"


class WeakCredentialError(CredentialValidationError):
    """Raised when the password is shorter than the minimum length."""

    message = "Email required and password min 6 chars"


class AccountAlreadyExistsError(AccountError):
    """Raised when attempting to create an account with a registered email."""

    message = "User already exists"


class InvalidCredentialsError(AccountError):
    """Raised for an unknown email or a wrong password alike."""

    message = "Invalid email or password"


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""

    message = "Account not found"


class StorageUnavailableError(AccountError):
    """Raised when the account store cannot be reached."""

    message = "Account storage unavailable"
