"""
Service dependencies for route handlers.
"""
from fastapi import Depends, Request

from propal.database.connections import MongoConnection
from propal.schemas.catalog import SpeechCatalog
from propal.services.account_service import AccountService
from propal.services.catalog_service import get_catalog
from propal.services.notifications import LoggingResetNotifier, ResetNotifier


def get_connection(request: Request) -> MongoConnection:
    """The MongoDB handle opened by the application lifespan."""
    return request.app.state.mongo


def get_notifier(request: Request) -> ResetNotifier:
    """Password reset notifier, overridable through ``app.state.notifier``."""
    notifier = getattr(request.app.state, "notifier", None)
    if notifier is None:
        notifier = LoggingResetNotifier()
        request.app.state.notifier = notifier
    return notifier


async def get_account_service(
    connection: MongoConnection = Depends(get_connection),
    notifier: ResetNotifier = Depends(get_notifier),
) -> AccountService:
    """Dependency to get AccountService instance."""
    return AccountService(connection.get_database(), notifier=notifier)


def get_speech_catalog() -> SpeechCatalog:
    """Dependency to get the speech-to-text catalog."""
    return get_catalog()
