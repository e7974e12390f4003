"""Fake implementations for testing."""

from tests.fakes.user_store_fake import FakeUserStore

__all__ = ["FakeUserStore"]
