"""
Database index management.
Ensures the indexes backing the account invariants exist on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from propal.database.databases import accounts_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the accounts collection."""
    accounts = db[accounts_db.Collections.ACCOUNTS]

    for index in accounts_db.INDEXES:
        options = {k: v for k, v in index.items() if k != "keys"}
        await accounts.create_index(index["keys"], **options)

    logger.info("Indexes ensured on %s", accounts_db.Collections.ACCOUNTS)
