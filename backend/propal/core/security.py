"""
Security utilities for password hashing and password reset tokens.
"""
import hashlib
import secrets
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext

from propal.config import get_settings

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().password_hash_rounds,
)

# 32 bytes -> 256 bits of entropy
RESET_TOKEN_BYTES = 32


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise (including
        when the stored value is not a recognised hash)
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def generate_reset_token() -> str:
    """Create a URL-safe, cryptographically random password reset token."""
    return secrets.token_urlsafe(RESET_TOKEN_BYTES)


def hash_reset_token(token: str) -> str:
    """
    Digest a reset token for storage.

    Only the digest is persisted so a leaked database cannot be used
    to redeem outstanding tokens.
    """
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def reset_token_expiry(ttl_minutes: int | None = None) -> datetime:
    """
    Compute the expiry timestamp for a newly issued reset token.

    Args:
        ttl_minutes: Optional override of the configured lifetime

    Returns:
        Timezone-aware UTC datetime
    """
    if ttl_minutes is None:
        ttl_minutes = get_settings().password_reset_token_ttl_minutes
    return datetime.now(timezone.utc) + timedelta(minutes=ttl_minutes)


def is_expired(expires_at: datetime) -> bool:
    """
    Check whether a stored expiry lies in the past.

    MongoDB hands datetimes back naive (UTC), so naive values are
    interpreted as UTC.
    """
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc) >= expires_at
