"""
Dependencies for dependency injection in routes.
"""
from propal.dependencies.services import (
    get_account_service,
    get_connection,
    get_notifier,
    get_speech_catalog,
)

__all__ = [
    "get_account_service",
    "get_connection",
    "get_notifier",
    "get_speech_catalog",
]
