"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from nova.core.config import Settings
from nova.core.database import DatabaseSessionManager
from nova.main import create_app


@pytest.fixture
def database_url(tmp_path):
    """Fresh single-file store per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'contacts.db'}"


@pytest.fixture
def test_settings(database_url):
    return Settings(DATABASE_URL=database_url, ENVIRONMENT="testing")


@pytest.fixture
async def session_manager(database_url):
    """Initialized store handle, disposed after the test."""
    manager = DatabaseSessionManager(database_url)
    await manager.init()
    try:
        yield manager
    finally:
        await manager.close()


@pytest.fixture
def client(test_settings):
    """Create test client around an app with its own temporary store."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


def valid_contact(**overrides):
    payload = {
        "name": "Ada",
        "email": "ada@x.io",
        "subject": "Hi",
        "message": "Test",
    }
    payload.update(overrides)
    return payload
