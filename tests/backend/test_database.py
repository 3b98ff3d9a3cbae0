"""
Tests for database connections and initialization.

These tests cover:
- MongoConnection lifecycle (lazy client, reuse, close)
- Index creation for the account invariants
"""

import pytest
from unittest.mock import MagicMock, patch


class TestMongoConnection:
    """Tests for MongoConnection handling."""

    def test_client_created_once_and_reused(self):
        """The client is built on first access and then reused."""
        from propal.config import Settings
        from propal.database.connections import MongoConnection

        settings = Settings(mongo_uri="mongodb://test:27017", mongo_db_name="test_db")

        with patch("propal.database.connections.AsyncIOMotorClient") as mock_client:
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            connection = MongoConnection(settings)
            assert connection.is_open is False

            first = connection.client
            second = connection.client

            mock_client.assert_called_once_with(
                "mongodb://test:27017",
                serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
            )
            assert first is second is mock_instance

    def test_get_database_defaults_to_configured_name(self):
        from propal.config import Settings
        from propal.database.connections import MongoConnection

        client = MagicMock()
        connection = MongoConnection(Settings(mongo_db_name="test_db"), client=client)

        connection.get_database()
        connection.get_database("other_db")

        client.__getitem__.assert_any_call("test_db")
        client.__getitem__.assert_any_call("other_db")

    def test_close_releases_client(self):
        """close should release the client and be idempotent."""
        from propal.database.connections import MongoConnection

        client = MagicMock()
        connection = MongoConnection(client=client)

        connection.close()
        connection.close()

        client.close.assert_called_once()
        assert connection.is_open is False


class TestIndexCreation:
    """Tests for index creation on the accounts collection."""

    @pytest.mark.asyncio
    async def test_unique_indexes_on_username_and_email(self, mock_accounts_db):
        indexes = await mock_accounts_db.accounts.index_information()

        assert indexes["username_unique"]["unique"] is True
        assert indexes["email_unique"]["unique"] is True
        assert "password_reset_token" in indexes

    @pytest.mark.asyncio
    async def test_create_indexes_is_idempotent(self, mock_accounts_db):
        from propal.database.registry import create_indexes

        await create_indexes(mock_accounts_db)
        indexes = await mock_accounts_db.accounts.index_information()

        assert {"username_unique", "email_unique", "password_reset_token"} <= set(indexes)
