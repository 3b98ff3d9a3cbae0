"""
Pydantic models for database documents and data structures.
"""
from propal.models.account import (
    Account,
    AgentConfiguration,
    DEFAULT_AGENT_CONFIGURATION,
    PasswordReset,
)

__all__ = [
    "Account",
    "AgentConfiguration",
    "DEFAULT_AGENT_CONFIGURATION",
    "PasswordReset",
]
