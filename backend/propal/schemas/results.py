"""
Uniform operation result returned to the presentation layer.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """
    Result envelope shared by every account operation.

    ``success`` is always present; the other fields are set depending on
    the operation (``user`` for register/login, ``data`` for reads and
    updates, ``message`` for acknowledgements, ``error`` on failure).
    """
    success: bool = Field(..., description="Whether the operation succeeded")
    user: Optional[str] = Field(None, description="Email of the authenticated/registered user")
    data: Optional[Any] = Field(None, description="Operation payload")
    message: Optional[str] = Field(None, description="Informational message")
    error: Optional[str] = Field(None, description="Error message on failure")
    kind: Optional[str] = Field(None, exclude=True)
