"""
Agent configuration request schemas.
"""
from pydantic import BaseModel, Field


class AgentSelection(BaseModel):
    """Provider/model/language picked on the agent page."""
    provider: str = Field(..., min_length=1, description="Speech-to-text provider value")
    model: str = Field(..., min_length=1, description="Model value")
    language: str = Field(..., min_length=1, description="Language value")
