"""
Account and configuration store: registration, login, profile and
agent configuration management.
"""
import logging
from typing import Any, Mapping, Optional, Union

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from propal.config import Settings, get_settings
from propal.core.errors import (
    DuplicateKey,
    InitializationFailed,
    InvalidCredentials,
    InvalidResetToken,
    NotFound,
    ValidationFailed,
)
from propal.core.security import (
    generate_reset_token,
    hash_password,
    hash_reset_token,
    is_expired,
    reset_token_expiry,
    verify_password,
)
from propal.database.databases import accounts_db
from propal.database.databases.accounts_db import Fields
from propal.models.account import (
    Account,
    AgentConfiguration,
    DEFAULT_AGENT_CONFIGURATION,
    PASSWORD_MIN_LENGTH,
    PasswordReset,
)
from propal.schemas.agent import AgentSelection
from propal.schemas.auth import RegisterRequest
from propal.schemas.catalog import SpeechCatalog
from propal.schemas.profile import ProfileResponse, ProfileUpdate
from propal.services.catalog_service import build_agent_configuration
from propal.services.notifications import LoggingResetNotifier, ResetNotifier

logger = logging.getLogger(__name__)

PASSWORD_RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent."
)
PASSWORD_RESET_DONE_MESSAGE = "Your password has been reset."


def _normalize_email(email: Any) -> Any:
    if isinstance(email, str):
        return email.strip().lower()
    return email


def _has_agent_config(doc: Mapping) -> bool:
    agent_config = doc.get(Fields.AGENT_CONFIG)
    return isinstance(agent_config, dict) and "provider" in agent_config


class AccountService:
    """Service for account and agent configuration operations."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        notifier: Optional[ResetNotifier] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize with the accounts database."""
        self.db = db
        self.accounts = db[accounts_db.Collections.ACCOUNTS]
        self.notifier = notifier or LoggingResetNotifier()
        self.settings = settings or get_settings()

    # ==================== Authentication ====================

    async def register(self, candidate: Union[RegisterRequest, Mapping]) -> str:
        """
        Register a new account.

        Args:
            candidate: username, email, password and optional phoneNumber

        Returns:
            Email of the created account

        Raises:
            ValidationFailed: If a schema constraint is violated
            DuplicateKey: If the username or email is already taken
        """
        try:
            if not isinstance(candidate, RegisterRequest):
                candidate = RegisterRequest.model_validate(candidate)
            account = Account(
                username=candidate.username,
                email=candidate.email,
                password=hash_password(candidate.password),
                phone_number=candidate.phone_number,
            )
        except ValidationError as e:
            raise ValidationFailed.from_validation_error(e) from e

        try:
            result = await self.accounts.insert_one(account.to_document())
        except DuplicateKeyError as e:
            raise DuplicateKey() from e

        logger.info("Registered account %s (%s)", account.email, result.inserted_id)
        return account.email

    async def authenticate(self, email: str, password: str) -> str:
        """
        Check an email/password pair.

        Unknown emails and wrong passwords fail with the same error so
        callers cannot probe which addresses are registered.

        Returns:
            Email of the authenticated account

        Raises:
            InvalidCredentials: If the pair does not match an account
        """
        doc = await self.accounts.find_one(
            {Fields.EMAIL: _normalize_email(email)},
            {Fields.EMAIL: 1, Fields.PASSWORD: 1},
        )
        if not doc or not verify_password(password, doc.get(Fields.PASSWORD, "")):
            raise InvalidCredentials()
        return doc[Fields.EMAIL]

    async def request_password_reset(self, email: str) -> str:
        """
        Issue a single-use reset token for the account, if it exists.

        The returned acknowledgement is identical whether or not the
        email is registered.

        Returns:
            Generic acknowledgement message
        """
        email = _normalize_email(email)
        doc = await self.accounts.find_one({Fields.EMAIL: email}, {Fields.ID: 1})

        if not doc:
            logger.warning("Forgot password request for non-existent email: %s", email)
            return PASSWORD_RESET_REQUESTED_MESSAGE

        token = generate_reset_token()
        reset = PasswordReset(
            token_hash=hash_reset_token(token),
            expires_at=reset_token_expiry(self.settings.password_reset_token_ttl_minutes),
        )
        reset_link = f"{self.settings.app_base_url.rstrip('/')}/reset-password?token={token}"

        # The answer must not depend on whether issuing the link worked
        try:
            await self.accounts.update_one(
                {Fields.ID: doc[Fields.ID]},
                {"$set": {Fields.PASSWORD_RESET: reset.model_dump(by_alias=True)}},
            )
            await self.notifier.send_password_reset(email, reset_link)
        except Exception:
            logger.exception("Issuing password reset link for %s failed", email)

        return PASSWORD_RESET_REQUESTED_MESSAGE

    async def reset_password(self, token: str, new_password: str) -> str:
        """
        Redeem a reset token and set a new password.

        Raises:
            ValidationFailed: If the new password is too short
            InvalidResetToken: If the token is unknown, used or expired
        """
        if not new_password or len(new_password) < PASSWORD_MIN_LENGTH:
            raise ValidationFailed("Password must be at least 8 characters.")

        token_hash = hash_reset_token(token or "")
        token_filter = {f"{Fields.PASSWORD_RESET}.tokenHash": token_hash}

        doc = await self.accounts.find_one(token_filter, {Fields.PASSWORD_RESET: 1})
        if not doc:
            raise InvalidResetToken()

        reset = PasswordReset.model_validate(doc[Fields.PASSWORD_RESET])
        if is_expired(reset.expires_at):
            await self.accounts.update_one(
                {Fields.ID: doc[Fields.ID], **token_filter},
                {"$unset": {Fields.PASSWORD_RESET: ""}},
            )
            raise InvalidResetToken()

        # Conditioned on the same digest so only one redemption can win
        updated = await self.accounts.find_one_and_update(
            {Fields.ID: doc[Fields.ID], **token_filter},
            {
                "$set": {Fields.PASSWORD: hash_password(new_password)},
                "$unset": {Fields.PASSWORD_RESET: ""},
            },
            projection={Fields.EMAIL: 1},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise InvalidResetToken()

        logger.info("Password reset completed for %s", updated[Fields.EMAIL])
        return PASSWORD_RESET_DONE_MESSAGE

    # ==================== Profile ====================

    async def get_profile(self, email: str) -> ProfileResponse:
        """
        Get the profile of an account (everything except the password).

        Raises:
            NotFound: If no account matches the email
        """
        doc = await self.accounts.find_one(
            {Fields.EMAIL: _normalize_email(email)},
            accounts_db.PROFILE_PROJECTION,
        )
        if not doc:
            raise NotFound()
        return ProfileResponse.from_document(doc)

    async def update_profile(
        self, email: str, partial: Union[ProfileUpdate, Mapping]
    ) -> ProfileResponse:
        """
        Overwrite the supplied profile fields, leaving the others untouched.

        Args:
            email: Email of the account to update
            partial: Any of username, email, phoneNumber, password

        Returns:
            The updated profile

        Raises:
            ValidationFailed: If a supplied field is malformed
            DuplicateKey: If the new username or email is taken
            NotFound: If no account matches the email
        """
        try:
            if not isinstance(partial, ProfileUpdate):
                partial = ProfileUpdate.model_validate(partial)
        except ValidationError as e:
            raise ValidationFailed.from_validation_error(e) from e

        changes = partial.changes()
        if not changes:
            return await self.get_profile(email)

        if Fields.PASSWORD in changes:
            changes[Fields.PASSWORD] = hash_password(changes[Fields.PASSWORD])

        # A blank phone number clears the field
        update = {}
        if changes.get(Fields.PHONE_NUMBER) == "":
            del changes[Fields.PHONE_NUMBER]
            update["$unset"] = {Fields.PHONE_NUMBER: ""}
        if changes:
            update["$set"] = changes

        try:
            doc = await self.accounts.find_one_and_update(
                {Fields.EMAIL: _normalize_email(email)},
                update,
                projection=accounts_db.PROFILE_PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateKey() from e

        if not doc:
            raise NotFound()

        logger.info(
            "Updated profile fields %s for %s",
            sorted(changes) + sorted(update.get("$unset", {})),
            doc[Fields.EMAIL],
        )
        return ProfileResponse.from_document(doc)

    # ==================== Agent configuration ====================

    async def get_agent_configuration(self, email: str) -> AgentConfiguration:
        """
        Get the agent configuration, initializing the default on first read.

        The default is written with an insert-if-absent update, so
        concurrent first reads persist it at most once and all observe
        the same value.

        Raises:
            NotFound: If no account matches the email
            InitializationFailed: If the default could not be persisted
        """
        email = _normalize_email(email)
        doc = await self.accounts.find_one(
            {Fields.EMAIL: email}, accounts_db.AGENT_CONFIG_PROJECTION
        )
        if not doc:
            raise NotFound("User not found for agent configuration.")

        if _has_agent_config(doc):
            return AgentConfiguration.model_validate(doc[Fields.AGENT_CONFIG])

        logger.warning(
            "No agent configuration found for %s. Initializing with default config.", email
        )
        try:
            updated = await self.accounts.find_one_and_update(
                {Fields.EMAIL: email, f"{Fields.AGENT_CONFIG}.provider": {"$exists": False}},
                {"$set": {Fields.AGENT_CONFIG: DEFAULT_AGENT_CONFIGURATION.model_dump(by_alias=True)}},
                projection=accounts_db.AGENT_CONFIG_PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
            if updated is None:
                # Another writer got there first, or the account is gone
                updated = await self.accounts.find_one(
                    {Fields.EMAIL: email}, accounts_db.AGENT_CONFIG_PROJECTION
                )
                if updated is None:
                    raise NotFound("User not found for agent configuration.")
        except PyMongoError as e:
            logger.error("Persisting default agent configuration for %s failed: %s", email, e)
            raise InitializationFailed() from e

        if not _has_agent_config(updated):
            raise InitializationFailed()
        return AgentConfiguration.model_validate(updated[Fields.AGENT_CONFIG])

    async def save_agent_configuration(
        self, config: Union[AgentConfiguration, Mapping], email: str
    ) -> AgentConfiguration:
        """
        Replace the whole agent configuration of an existing account.

        Never creates an account.

        Raises:
            ValidationFailed: If the configuration is incomplete
            NotFound: If no account matches the email
        """
        try:
            if not isinstance(config, AgentConfiguration):
                config = AgentConfiguration.model_validate(config)
        except ValidationError as e:
            raise ValidationFailed.from_validation_error(e) from e

        email = _normalize_email(email)
        updated = await self.accounts.find_one_and_update(
            {Fields.EMAIL: email},
            {"$set": {Fields.AGENT_CONFIG: config.model_dump(by_alias=True)}},
            projection=accounts_db.AGENT_CONFIG_PROJECTION,
            return_document=ReturnDocument.AFTER,
            upsert=False,
        )
        if not updated:
            logger.error("Save agent config: no account for %s", email)
            raise NotFound("User not found for configuration update.")

        logger.info("Saved agent configuration for %s: %s", email, config.provider)
        return AgentConfiguration.model_validate(updated[Fields.AGENT_CONFIG])

    async def save_agent_selection(
        self,
        selection: Union[AgentSelection, Mapping],
        email: str,
        catalog: SpeechCatalog,
    ) -> AgentConfiguration:
        """Save a provider/model/language pick with its derived display name."""
        try:
            if not isinstance(selection, AgentSelection):
                selection = AgentSelection.model_validate(selection)
        except ValidationError as e:
            raise ValidationFailed.from_validation_error(e) from e

        config = build_agent_configuration(catalog, selection)
        return await self.save_agent_configuration(config, email)
