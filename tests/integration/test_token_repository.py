"""Integration tests for TokenRepository.

Tests cover:
- Save and find
- Conditional touch (live, stale, unknown, monotonic last_used_at)
- Conditional stale delete never removes a live token
- Bulk eviction by age
- Per-user and per-value deletion

Architecture:
- Integration tests with a REAL database (in-memory SQLite via aiosqlite)
- Uses test_database fixture (fresh instance per test)
"""

from datetime import timedelta

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.domain.protocols import TokenData
from src.infrastructure.persistence.repositories.token_repository import (
    TokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from tests.utils.fakes import DEFAULT_NOW, create_test_user

NOW = DEFAULT_NOW
CUTOFF = NOW - timedelta(days=7)


@pytest_asyncio.fixture
async def user(test_database):
    user = create_test_user()
    async with test_database.get_session() as session:
        await UserRepository(session).save(user)
    return user


async def save_token(test_database, value, user_id, last_used_at):
    async with test_database.get_session() as session:
        await TokenRepository(session).save(
            TokenData(value=value, user_id=user_id, last_used_at=last_used_at)
        )


@pytest.mark.integration
class TestTokenRepositorySaveAndFind:
    """Test save and find_by_value."""

    async def test_save_and_find(self, test_database, user):
        await save_token(test_database, "abc", user.id, NOW)

        async with test_database.get_session() as session:
            found = await TokenRepository(session).find_by_value("abc")

        assert found == TokenData(value="abc", user_id=user.id, last_used_at=NOW)

    async def test_find_unknown_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await TokenRepository(session).find_by_value("missing") is None


@pytest.mark.integration
class TestTokenRepositoryTouch:
    """Test the conditional touch."""

    async def test_touch_live_token_returns_owner_and_advances(
        self, test_database, user
    ):
        await save_token(test_database, "abc", user.id, NOW - timedelta(days=1))

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            owner = await repo.touch("abc", now=NOW, cutoff=CUTOFF)
            found = await repo.find_by_value("abc")

        assert owner == user.id
        assert found.last_used_at == NOW

    async def test_touch_never_moves_last_used_at_backwards(self, test_database, user):
        await save_token(test_database, "abc", user.id, NOW)
        earlier = NOW - timedelta(seconds=5)

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            owner = await repo.touch("abc", now=earlier, cutoff=CUTOFF)
            found = await repo.find_by_value("abc")

        assert owner == user.id
        assert found.last_used_at == NOW

    async def test_touch_stale_token_returns_none_and_keeps_row(
        self, test_database, user
    ):
        stale_at = CUTOFF - timedelta(milliseconds=1)
        await save_token(test_database, "abc", user.id, stale_at)

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            owner = await repo.touch("abc", now=NOW, cutoff=CUTOFF)
            found = await repo.find_by_value("abc")

        assert owner is None
        assert found.last_used_at == stale_at

    async def test_token_exactly_at_cutoff_is_live(self, test_database, user):
        await save_token(test_database, "abc", user.id, CUTOFF)

        async with test_database.get_session() as session:
            owner = await TokenRepository(session).touch("abc", now=NOW, cutoff=CUTOFF)

        assert owner == user.id

    async def test_touch_unknown_returns_none(self, test_database):
        async with test_database.get_session() as session:
            owner = await TokenRepository(session).touch(
                "missing", now=NOW, cutoff=CUTOFF
            )

        assert owner is None


@pytest.mark.integration
class TestTokenRepositoryDelete:
    """Test deletions."""

    async def test_delete_if_stale_removes_stale_token(self, test_database, user):
        await save_token(test_database, "abc", user.id, CUTOFF - timedelta(hours=1))

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            assert await repo.delete_if_stale("abc", cutoff=CUTOFF) is True
            assert await repo.find_by_value("abc") is None

    async def test_delete_if_stale_keeps_live_token(self, test_database, user):
        await save_token(test_database, "abc", user.id, NOW)

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            assert await repo.delete_if_stale("abc", cutoff=CUTOFF) is False
            assert await repo.find_by_value("abc") is not None

    async def test_delete_older_than_removes_only_stale_tokens(
        self, test_database, user
    ):
        await save_token(test_database, "stale-1", user.id, CUTOFF - timedelta(days=1))
        await save_token(
            test_database, "stale-2", user.id, CUTOFF - timedelta(milliseconds=1)
        )
        await save_token(test_database, "fresh", user.id, NOW - timedelta(hours=1))

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            deleted = await repo.delete_older_than(CUTOFF)
            remaining = await repo.find_by_value("fresh")

        assert deleted == 2
        assert remaining is not None

    async def test_delete_older_than_on_empty_table(self, test_database):
        async with test_database.get_session() as session:
            assert await TokenRepository(session).delete_older_than(CUTOFF) == 0

    async def test_delete_by_value_is_idempotent(self, test_database, user):
        await save_token(test_database, "abc", user.id, NOW)

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            assert await repo.delete_by_value("abc") is True
            assert await repo.delete_by_value("abc") is False

    async def test_delete_all_for_user(self, test_database, user):
        other = create_test_user(email="user2@mail.com", username="user2")
        async with test_database.get_session() as session:
            await UserRepository(session).save(other)
        await save_token(test_database, "a", user.id, NOW)
        await save_token(test_database, "b", user.id, NOW)
        await save_token(test_database, "c", other.id, NOW)

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            deleted = await repo.delete_all_for_user(user.id)
            survivor = await repo.find_by_value("c")

        assert deleted == 2
        assert survivor is not None

    async def test_unknown_user_has_no_tokens(self, test_database):
        async with test_database.get_session() as session:
            assert await TokenRepository(session).delete_all_for_user(uuid7()) == 0
