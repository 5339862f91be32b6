"""Pytest configuration.

This configuration ensures:
1. Settings are loaded in testing mode (set before any src import)
2. Each database test gets a fresh in-memory SQLite database
3. Custom markers are registered
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("EMAIL_BACKEND", "stub")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created."""
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_all()
    yield database
    await database.close()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API endpoint tests")
