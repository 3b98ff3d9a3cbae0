"""
Authentication request schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from propal.models.account import (
    EMAIL_PATTERN,
    PASSWORD_MIN_LENGTH,
    PHONE_NUMBER_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)


def _normalize_email(value):
    if isinstance(value, str):
        value = value.strip().lower()
    return value


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(
        ...,
        min_length=1,
        max_length=USERNAME_MAX_LENGTH,
        description="Unique username (max 20 characters)",
    )
    email: str = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        description="User password (min 8 characters)",
    )
    phone_number: Optional[str] = Field(
        None,
        alias="phoneNumber",
        max_length=PHONE_NUMBER_MAX_LENGTH,
        description="Optional phone number (max 15 characters)",
    )

    class Config:
        populate_by_name = True

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("phone_number", mode="before")
    @classmethod
    def blank_phone_is_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)

    @field_validator("email")
    @classmethod
    def check_email_shape(cls, value: str) -> str:
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError("Please fill a valid email address")
        return value


class LoginRequest(BaseModel):
    """Login request body."""
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class ForgotPasswordRequest(BaseModel):
    """Forgot password request body."""
    email: str = Field(..., description="Email address of the account to recover")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class ResetPasswordRequest(BaseModel):
    """Password reset redemption body."""
    token: str = Field(..., min_length=1, description="Token from the reset link")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        description="New password (min 8 characters)",
    )
