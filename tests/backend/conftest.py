"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing FastAPI routes, services, and database operations.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mock_notifier():
    """Reset notifier that records calls instead of delivering anything."""
    notifier = AsyncMock()
    notifier.send_password_reset = AsyncMock()
    return notifier


@pytest_asyncio.fixture
async def account_service(mock_accounts_db, mock_notifier):
    """AccountService bound to the in-memory accounts database."""
    from propal.services.account_service import AccountService

    return AccountService(mock_accounts_db, notifier=mock_notifier)


@pytest_asyncio.fixture
async def registered_user(account_service, test_user_data) -> dict:
    """Register the default test user and return its registration data."""
    await account_service.register(test_user_data)
    return test_user_data


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def mongo_connection():
    """
    MongoConnection wrapping a fresh in-memory client.

    Built synchronously because TestClient drives the app on its own loop;
    the app lifespan creates the indexes.
    """
    mongomock_motor = pytest.importorskip("mongomock_motor")
    from propal.database.connections import MongoConnection

    return MongoConnection(client=mongomock_motor.AsyncMongoMockClient())


@pytest.fixture
def app_with_mocks(mongo_connection, mock_notifier):
    """
    Create the FastAPI app with the MongoDB handle injected.

    The lifespan reuses the injected handle instead of connecting.
    """
    from propal.main import create_app

    app = create_app(mongo_connection)
    app.state.notifier = mock_notifier
    return app


@pytest.fixture
def client_with_mocks(app_with_mocks):
    """TestClient using the mocked app."""
    from fastapi.testclient import TestClient

    with TestClient(app_with_mocks) as c:
        yield c


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the uniform failure envelope."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
