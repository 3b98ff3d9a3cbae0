"""
Error taxonomy for the account and configuration store.

Every error carries a ``kind`` (stable identifier) and a user-facing message.
The operation boundary turns them into ``{success: false, error: message}``.
"""


class AccountStoreError(Exception):
    """Base class for account store errors."""

    kind = "Error"
    default_message = "Request failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(AccountStoreError):
    """Raised when input is malformed, before anything is persisted."""

    kind = "ValidationFailed"
    default_message = "Invalid input."

    @classmethod
    def from_validation_error(cls, exc) -> "ValidationFailed":
        """Build from a pydantic ValidationError, keeping the first problem."""
        errors = exc.errors()
        if not errors:
            return cls()
        first = errors[0]
        msg = first.get("msg") or cls.default_message
        if msg.startswith("Value error, "):
            return cls(msg[len("Value error, "):])
        field = ".".join(str(part) for part in first.get("loc", ()))
        return cls(f"{field}: {msg}" if field else msg)


class DuplicateKey(AccountStoreError):
    """Raised when username or email is already taken."""

    kind = "DuplicateKey"
    default_message = "Email or username already exists."


class NotFound(AccountStoreError):
    """Raised when no account matches the given email."""

    kind = "NotFound"
    default_message = "User not found."


class InvalidCredentials(AccountStoreError):
    """Raised for an unknown email or a wrong password (same message for both)."""

    kind = "InvalidCredentials"
    default_message = "Invalid email or password."


class InitializationFailed(AccountStoreError):
    """Raised when the default agent configuration could not be persisted."""

    kind = "InitializationFailed"
    default_message = "Failed to initialize default agent configuration."


class StoreUnavailable(AccountStoreError):
    """Raised when the database cannot be reached."""

    kind = "StoreUnavailable"
    default_message = "Service temporarily unavailable. Please try again later."


class InvalidResetToken(AccountStoreError):
    """Raised when a password reset token is unknown, used or expired."""

    kind = "InvalidResetToken"
    default_message = "Invalid or expired password reset token."
