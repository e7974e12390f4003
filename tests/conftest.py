"""Pytest configuration and fixtures.

Shared fixtures used across unit tests. The fake store keeps everything
in memory, so tests are fast and each one gets fresh state.
"""

from datetime import datetime, timezone

import pytest

from user_store.domain.entities.user import User
from user_store.infrastructure.config.settings import get_settings
from tests.fakes.user_store_fake import FakeUserStore


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_user() -> User:
    """Create a persisted-looking user with id=1."""
    return User(
        id=1,
        email="a@example.com",
        name="Alice",
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def another_user() -> User:
    """Create another persisted-looking user."""
    return User(
        id=2,
        email="another@example.com",
        name="Another User",
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def fake_store() -> FakeUserStore:
    """Provide an empty FakeUserStore."""
    return FakeUserStore()


@pytest.fixture
def fake_store_with_users(sample_user, another_user) -> FakeUserStore:
    """Provide a FakeUserStore pre-populated with two users."""
    return FakeUserStore(initial_data=[sample_user, another_user])
