"""
Database module - MongoDB connection handle and collection definitions.
"""
from propal.database.connections import MongoConnection
from propal.database.databases import accounts_db
from propal.database.registry import create_indexes

__all__ = [
    "MongoConnection",
    "accounts_db",
    "create_indexes",
]
