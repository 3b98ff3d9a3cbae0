"""
User router for profile and agent configuration.
"""
from fastapi import APIRouter, Depends, Response

from propal.dependencies.services import get_account_service, get_speech_catalog
from propal.models.account import AgentConfiguration
from propal.routers.responses import with_status
from propal.schemas.agent import AgentSelection
from propal.schemas.catalog import SpeechCatalog
from propal.schemas.profile import ProfileUpdate
from propal.schemas.results import ActionResult
from propal.services import actions
from propal.services.account_service import AccountService

router = APIRouter(prefix="/users/{email}", tags=["Users"])


@router.get(
    "/profile",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Get profile",
)
async def get_profile(
    email: str,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """Get every profile field of the account except the password."""
    result = await actions.get_user_profile(account_service, email)
    return with_status(response, result)


@router.patch(
    "/profile",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Update profile",
)
async def update_profile(
    email: str,
    body: ProfileUpdate,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """
    Update some profile fields.

    Only `username`, `email`, `phoneNumber` and `password` may be sent;
    omitted fields are left unchanged.
    """
    result = await actions.update_user_profile(account_service, email, body)
    return with_status(response, result)


@router.get(
    "/agent-config",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Get agent configuration",
)
async def get_agent_configuration(
    email: str,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """Get the agent configuration, creating the default one on first access."""
    result = await actions.get_agent_configuration(account_service, email)
    return with_status(response, result)


@router.put(
    "/agent-config",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Replace agent configuration",
)
async def save_agent_configuration(
    email: str,
    body: AgentConfiguration,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """Replace the whole agent configuration of an existing account."""
    result = await actions.save_agent_configuration(account_service, body, email)
    return with_status(response, result)


@router.put(
    "/agent-config/selection",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Save a provider/model/language selection",
)
async def save_agent_selection(
    email: str,
    body: AgentSelection,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
    catalog: SpeechCatalog = Depends(get_speech_catalog),
):
    """Save a selection; the display name is derived from the catalog."""
    result = await actions.save_agent_selection(account_service, body, email, catalog)
    return with_status(response, result)
