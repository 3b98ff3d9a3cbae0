"""
Global test fixtures for the PROPAL backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test account data
- Cheap bcrypt cost factor so hashing stays fast
"""

import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Must be set before propal.core.security builds its CryptContext
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_accounts_db(mock_async_mongo_client):
    """Provide mock accounts database with the real indexes."""
    from propal.database.registry import create_indexes

    db = mock_async_mongo_client["propal_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# Account Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "testuser",
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
        "phoneNumber": "+1 555 0100",
    }


@pytest.fixture
def other_user_data() -> dict:
    """A second, distinct account."""
    return {
        "username": "otheruser",
        "email": "other@example.com",
        "password": "AnotherPassword456!",
    }


@pytest.fixture
def agent_config_data() -> dict:
    """A complete agent configuration as sent by the agent page."""
    return {
        "provider": "deepgram",
        "model": "nova-2",
        "language": "hi",
        "displayName": "Agent in Hindi",
    }
