"""
Service layer for business logic.
"""
from propal.services.account_service import AccountService
from propal.services.catalog_service import get_catalog, load_catalog
from propal.services.notifications import LoggingResetNotifier, ResetNotifier

__all__ = [
    "AccountService",
    "get_catalog",
    "load_catalog",
    "LoggingResetNotifier",
    "ResetNotifier",
]
