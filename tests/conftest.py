"""
Test configuration and fixtures for the short link service.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from main import create_app
from shortlink_app.config import Settings
from shortlink_app.database.connection import Database

# Test database configuration
TEST_DATABASE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def test_settings():
    """Settings for an isolated app: throwaway SQLite file, in-memory counter"""
    return Settings(
        database_url=TEST_DATABASE_URL,
        counter_backend="memory",
        environment="test",
        log_level="WARNING",
    )


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    database = Database(TEST_DATABASE_URL)
    database.drop_all()
    database.create_all()
    
    db = database.session()
    
    try:
        yield db
    finally:
        # Cleanup
        db.close()
        database.drop_all()
        database.dispose()


@pytest.fixture(scope="function")
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture(scope="function")
def client(app):
    """
    Test client for a freshly built app.
    Entering the client runs the lifespan, so app.state is populated.
    """
    with TestClient(app) as test_client:
        # Start from empty tables even if a previous run crashed
        app.state.database.drop_all()
        app.state.database.create_all()
        yield test_client
        app.state.database.drop_all()
    
    # Clean up overrides
    app.dependency_overrides.clear()
