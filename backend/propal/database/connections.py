"""
MongoDB connection management.

The client is owned by a ``MongoConnection`` created once at application
startup (see ``propal.main.lifespan``) and closed at shutdown. Request
handlers reach it through dependencies, never through module globals.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from propal.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """Explicitly owned handle around an ``AsyncIOMotorClient``."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[AsyncIOMotorClient] = None,
    ):
        """
        Args:
            settings: Settings to read the URI and database name from
            client: Pre-built client (tests pass an in-memory one)
        """
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> AsyncIOMotorClient:
        """Return the client, creating it on first use."""
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.settings.mongo_uri,
                serverSelectionTimeoutMS=self.settings.mongo_server_selection_timeout_ms,
            )
            logger.info("MongoDB client created")
        return self._client

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def get_database(self, db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
        """Get a MongoDB database by name (defaults to the configured one)."""
        return self.client[db_name or self.settings.mongo_db_name]

    async def ping(self) -> None:
        """Round-trip to the server; raises on failure."""
        await self.client.admin.command("ping")

    def close(self) -> None:
        """Release the client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB client closed")
