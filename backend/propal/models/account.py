"""
Account model for the accounts database.
"""
import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Basic local@domain.tld shape
EMAIL_PATTERN = re.compile(r".+@.+\..+")

USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8
PHONE_NUMBER_MAX_LENGTH = 15


class AgentConfiguration(BaseModel):
    """
    A user's speech-to-text pipeline selection.

    Embedded in the account document under ``agentConfig`` and always
    written as a whole.
    """
    provider: str = Field(..., min_length=1, description="Speech-to-text provider identifier")
    model: str = Field(..., min_length=1, description="Model offered by the provider")
    language: str = Field(..., min_length=1, description="Language supported by the model")
    display_name: str = Field(
        ...,
        alias="displayName",
        min_length=1,
        description="Human readable label, e.g. 'Agent in English (US)'",
    )

    class Config:
        populate_by_name = True


DEFAULT_AGENT_CONFIGURATION = AgentConfiguration(
    provider="default-provider",
    model="default-model",
    language="en-US",
    display_name="Default Agent",
)


class PasswordReset(BaseModel):
    """Outstanding password reset request stored on the account."""
    token_hash: str = Field(..., alias="tokenHash", description="SHA-256 digest of the issued token")
    expires_at: datetime = Field(..., alias="expiresAt", description="Token expiry (UTC)")

    class Config:
        populate_by_name = True


class Account(BaseModel):
    """
    Account document model for the accounts collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(
        ...,
        min_length=1,
        max_length=USERNAME_MAX_LENGTH,
        description="Unique username",
    )
    email: str = Field(..., description="Unique, lower-cased email address")
    password: str = Field(..., description="Bcrypt hashed password")
    phone_number: Optional[str] = Field(
        None,
        alias="phoneNumber",
        max_length=PHONE_NUMBER_MAX_LENGTH,
        description="Optional phone number",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
        description="Account creation timestamp",
    )
    agent_config: Optional[AgentConfiguration] = Field(None, alias="agentConfig")
    password_reset: Optional[PasswordReset] = Field(None, alias="passwordReset")

    class Config:
        populate_by_name = True

    @field_validator("username", "phone_number", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
        return value

    @field_validator("email")
    @classmethod
    def check_email_shape(cls, value: str) -> str:
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError("Please fill a valid email address")
        return value

    def to_document(self) -> dict:
        """Serialize for insertion (no ``_id``, unset optionals omitted)."""
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)
