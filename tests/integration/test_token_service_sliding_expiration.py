"""Integration tests for sliding session expiration.

TokenService runs against the real TokenRepository and SystemClock; wall
clock time is moved with freezegun.

Tests cover:
- Use within the window keeps extending the token
- Seven days plus a moment of inactivity kills it (and deletes the row)
- Exactly seven days idle is still alive

Architecture:
- Integration tests with a REAL database (in-memory SQLite via aiosqlite)
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest
import pytest_asyncio
from freezegun import freeze_time

from src.application.services import TokenService
from src.core.result import Failure, Success
from src.infrastructure.clock import SystemClock
from src.infrastructure.persistence.repositories import TokenRepository, UserRepository
from src.infrastructure.security import OpaqueTokenService
from tests.utils.fakes import create_test_user

START = "2026-01-01 12:00:00"


@pytest_asyncio.fixture
async def user(test_database):
    user = create_test_user()
    async with test_database.get_session() as session:
        await UserRepository(session).save(user)
    return user


def build_service(session):
    return TokenService(
        token_repo=TokenRepository(session),
        token_generator=OpaqueTokenService(),
        clock=SystemClock(),
        logger=Mock(),
        inactivity_threshold=timedelta(days=7),
    )


async def validate(database, value):
    async with database.get_session() as session:
        return await build_service(session).validate(value)


@pytest.mark.integration
class TestSlidingExpiration:
    """Validation pushes the inactivity deadline forward."""

    async def test_regular_use_keeps_token_alive(self, test_database, user):
        with freeze_time(START) as frozen:
            async with test_database.get_session() as session:
                value = await build_service(session).issue(user.id)

            for _ in range(3):
                frozen.tick(timedelta(days=6))
                result = await validate(test_database, value)
                assert isinstance(result, Success)
                assert result.value == user.id

    async def test_idle_token_expires_and_is_deleted(self, test_database, user):
        with freeze_time(START) as frozen:
            async with test_database.get_session() as session:
                value = await build_service(session).issue(user.id)

            frozen.tick(timedelta(days=7, seconds=1))
            result = await validate(test_database, value)

            assert isinstance(result, Failure)
            async with test_database.get_session() as session:
                assert await TokenRepository(session).find_by_value(value) is None

    async def test_exactly_seven_days_idle_is_alive(self, test_database, user):
        with freeze_time(START) as frozen:
            async with test_database.get_session() as session:
                value = await build_service(session).issue(user.id)

            frozen.tick(timedelta(days=7))

            assert isinstance(await validate(test_database, value), Success)
