"""
Request and response schemas for API endpoints.
"""
from propal.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from propal.schemas.profile import ProfileResponse, ProfileUpdate
from propal.schemas.agent import AgentSelection
from propal.schemas.catalog import SpeechCatalog
from propal.schemas.results import ActionResult

__all__ = [
    # Auth
    "ForgotPasswordRequest",
    "LoginRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    # Profile
    "ProfileResponse",
    "ProfileUpdate",
    # Agent
    "AgentSelection",
    "SpeechCatalog",
    # Results
    "ActionResult",
]
