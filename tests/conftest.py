"""
Shared pytest fixtures for user-service tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from user_service.core.config import reset_settings
from user_service.di.container import reset_container
from user_service.domain.models.user import User
from user_service.domain.repositories.user_repository import UserRepository
from user_service.infrastructure.db.memory_user_repository import InMemoryUserRepository


TEST_ENV = {
    "MONGO_URI": "mongodb://localhost:27017",
    "MONGO_DB_NAME": "test_ecomarket_users",
    "USER_STORE": "memory",
    "BCRYPT_ROUNDS": "4",
    "HYPERMEDIA_ENABLED": "false",
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture(autouse=True)
def test_env():
    """Run every test against the in-memory store with cheap bcrypt rounds."""
    with patch.dict(os.environ, TEST_ENV, clear=False):
        reset_settings()
        reset_container()
        yield TEST_ENV
    reset_settings()
    reset_container()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings where modules use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_timeout_ms = 1000
    mock.user_store = "memory"
    mock.bcrypt_rounds = 4
    mock.hypermedia_enabled = False
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "WARNING"

    with patch("user_service.core.config.get_settings", return_value=mock), patch(
        "user_service.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def stored_user():
    """A persisted user as the repository would return it."""
    return User(
        id=1,
        username="testuser",
        email="test@example.com",
        hashed_password="$2b$04$abcdefghijklmnopqrstuu",
        full_name="Test User",
    )
