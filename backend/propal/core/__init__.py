"""
Core module - Security, errors, logging and other core utilities.
"""
from propal.core.errors import (
    AccountStoreError,
    DuplicateKey,
    InitializationFailed,
    InvalidCredentials,
    InvalidResetToken,
    NotFound,
    StoreUnavailable,
    ValidationFailed,
)
from propal.core.security import (
    hash_password,
    verify_password,
    generate_reset_token,
    hash_reset_token,
)

__all__ = [
    "AccountStoreError",
    "DuplicateKey",
    "InitializationFailed",
    "InvalidCredentials",
    "InvalidResetToken",
    "NotFound",
    "StoreUnavailable",
    "ValidationFailed",
    "hash_password",
    "verify_password",
    "generate_reset_token",
    "hash_reset_token",
]
