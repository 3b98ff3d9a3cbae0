"""
Profile request/response schemas.
"""
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from propal.models.account import (
    AgentConfiguration,
    PHONE_NUMBER_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)

USERNAME_MIN_LENGTH = 3
UPDATE_PASSWORD_MIN_LENGTH = 6

UPDATE_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_NUMBER_PATTERN = re.compile(r"^\+?[0-9\s\-().extExt]{7,20}$")


class ProfileResponse(BaseModel):
    """Account fields returned to callers (never includes the password)."""
    id: str = Field(..., alias="_id", description="Account ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email address")
    phone_number: Optional[str] = Field(None, alias="phoneNumber", description="Phone number")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Account creation date")
    agent_config: Optional[AgentConfiguration] = Field(None, alias="agentConfig")

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: dict) -> "ProfileResponse":
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls.model_validate(doc)


class ProfileUpdate(BaseModel):
    """
    Sparse profile update.

    Only the fields present in the request are written; everything else
    on the account is left untouched.
    """
    username: Optional[str] = Field(None, description="New username (3-20 characters)")
    email: Optional[str] = Field(None, description="New email address")
    phone_number: Optional[str] = Field(None, alias="phoneNumber", description="New phone number")
    password: Optional[str] = Field(None, description="New password (min 6 characters)")

    class Config:
        populate_by_name = True
        extra = "forbid"

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

    @field_validator("username")
    @classmethod
    def check_username(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if len(value) < USERNAME_MIN_LENGTH:
            raise ValueError("Username must be at least 3 characters long.")
        if len(value) > USERNAME_MAX_LENGTH:
            raise ValueError("Username cannot be more than 20 characters.")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not UPDATE_EMAIL_PATTERN.fullmatch(value):
            raise ValueError("Please enter a valid email address.")
        return value

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, value: Optional[str]) -> Optional[str]:
        # Blank means "no phone number" and clears the stored one
        if not value:
            return value
        if not PHONE_NUMBER_PATTERN.match(value) or len(value) > PHONE_NUMBER_MAX_LENGTH:
            raise ValueError("Please enter a valid phone number.")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < UPDATE_PASSWORD_MIN_LENGTH:
            raise ValueError("New password must be at least 6 characters long.")
        return value

    def changes(self) -> dict:
        """Return the supplied fields keyed by their document names."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
