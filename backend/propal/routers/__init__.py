"""
API Routers module.
"""
from propal.routers import auth, catalog, health, users

__all__ = ["auth", "catalog", "health", "users"]
