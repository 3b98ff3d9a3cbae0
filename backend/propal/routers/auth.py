"""
Authentication router for registration, login and password recovery.
"""
from fastapi import APIRouter, Depends, Response, status

from propal.dependencies.services import get_account_service
from propal.routers.responses import with_status
from propal.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from propal.schemas.results import ActionResult
from propal.services import actions
from propal.services.account_service import AccountService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=ActionResult,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """
    Register a new user account.

    - **username**: Unique username (max 20 characters)
    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 8 characters)
    - **phoneNumber**: Optional phone number
    """
    result = await actions.register_user(account_service, body)
    return with_status(response, result, status.HTTP_201_CREATED)


@router.post(
    "/login",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Check email and password",
)
async def login(
    body: LoginRequest,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """
    Authenticate with email and password.

    On success `user` holds the account email, which the client keeps as
    its session anchor.
    """
    result = await actions.login_user(account_service, body.email, body.password)
    return with_status(response, result)


@router.post(
    "/forgot-password",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Request a password reset link",
)
async def forgot_password(
    body: ForgotPasswordRequest,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """
    Request a password reset.

    Always answers with the same message, whether or not the email is
    registered.
    """
    result = await actions.forgot_password(account_service, body.email)
    return with_status(response, result)


@router.post(
    "/reset-password",
    response_model=ActionResult,
    response_model_exclude_none=True,
    summary="Set a new password with a reset token",
)
async def reset_password(
    body: ResetPasswordRequest,
    response: Response,
    account_service: AccountService = Depends(get_account_service),
):
    """Redeem a single-use reset token."""
    result = await actions.reset_password(account_service, body.token, body.password)
    return with_status(response, result)
