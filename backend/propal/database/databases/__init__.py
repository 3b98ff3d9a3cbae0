"""
Database definitions and collection constants.
"""
from propal.database.databases import accounts_db

__all__ = ["accounts_db"]
