"""
Operation boundary for the account store.

Each action calls the service and folds every outcome into an
``ActionResult``; nothing raised by the store reaches the caller.
"""
import logging
from typing import Awaitable, Mapping, Union

from pymongo.errors import PyMongoError

from propal.core.errors import AccountStoreError, StoreUnavailable
from propal.models.account import AgentConfiguration
from propal.schemas.agent import AgentSelection
from propal.schemas.auth import RegisterRequest
from propal.schemas.catalog import SpeechCatalog
from propal.schemas.profile import ProfileUpdate
from propal.schemas.results import ActionResult
from propal.services.account_service import AccountService

logger = logging.getLogger(__name__)


def failure(error: AccountStoreError) -> ActionResult:
    return ActionResult(success=False, error=error.message, kind=error.kind)


async def run_action(label: str, operation: Awaitable[ActionResult]) -> ActionResult:
    """
    Await an operation and convert any failure into a result.

    Args:
        label: Human readable operation name used in logs and fallback errors
        operation: Awaitable producing the success result
    """
    try:
        return await operation
    except AccountStoreError as e:
        logger.info("%s failed (%s): %s", label, e.kind, e.message)
        return failure(e)
    except PyMongoError:
        logger.exception("%s failed: database error", label)
        return failure(StoreUnavailable())
    except Exception:
        logger.exception("%s failed: unexpected error", label)
        return ActionResult(success=False, error=f"{label} failed.", kind="Error")


def _dump(model) -> dict:
    return model.model_dump(by_alias=True, mode="json")


async def register_user(
    service: AccountService, user_data: Union[RegisterRequest, Mapping]
) -> ActionResult:
    async def _register():
        email = await service.register(user_data)
        return ActionResult(success=True, user=email)

    return await run_action("Registration", _register())


async def login_user(service: AccountService, email: str, password: str) -> ActionResult:
    async def _login():
        user = await service.authenticate(email, password)
        return ActionResult(success=True, user=user)

    return await run_action("Login", _login())


async def forgot_password(service: AccountService, email: str) -> ActionResult:
    async def _forgot():
        message = await service.request_password_reset(email)
        return ActionResult(success=True, message=message)

    return await run_action("Forgot password", _forgot())


async def reset_password(service: AccountService, token: str, password: str) -> ActionResult:
    async def _reset():
        message = await service.reset_password(token, password)
        return ActionResult(success=True, message=message)

    return await run_action("Password reset", _reset())


async def get_user_profile(service: AccountService, email: str) -> ActionResult:
    async def _get():
        profile = await service.get_profile(email)
        return ActionResult(success=True, data=_dump(profile))

    return await run_action("Fetch profile", _get())


async def update_user_profile(
    service: AccountService, email: str, updates: Union[ProfileUpdate, Mapping]
) -> ActionResult:
    async def _update():
        profile = await service.update_profile(email, updates)
        return ActionResult(
            success=True, data=_dump(profile), message="Profile updated successfully."
        )

    return await run_action("Update profile", _update())


async def get_agent_configuration(service: AccountService, email: str) -> ActionResult:
    async def _get():
        config = await service.get_agent_configuration(email)
        return ActionResult(success=True, data=_dump(config))

    return await run_action("Retrieve agent configuration", _get())


async def save_agent_configuration(
    service: AccountService,
    config: Union[AgentConfiguration, Mapping],
    email: str,
) -> ActionResult:
    async def _save():
        saved = await service.save_agent_configuration(config, email)
        return ActionResult(
            success=True, data=_dump(saved), message="Configuration saved successfully."
        )

    return await run_action("Save agent configuration", _save())


async def save_agent_selection(
    service: AccountService,
    selection: Union[AgentSelection, Mapping],
    email: str,
    catalog: SpeechCatalog,
) -> ActionResult:
    async def _save():
        saved = await service.save_agent_selection(selection, email, catalog)
        return ActionResult(
            success=True, data=_dump(saved), message="Configuration saved successfully."
        )

    return await run_action("Save agent configuration", _save())
