"""Unit tests for the UserModel <-> User mapping."""

from datetime import datetime, timezone

import pytest

from user_store.domain.entities.user import User
from user_store.infrastructure.persistence.models.user_model import UserModel

pytestmark = pytest.mark.unit


def test_to_entity_does_not_reapply_write_checks():
    model = UserModel(id=1, email="\t", name="")
    model.created_at = datetime(2026, 1, 1, 12, 0)
    model.updated_at = datetime(2026, 1, 1, 12, 0)

    user = model.to_entity()

    assert user.email == "\t"
    assert user.name == ""


def test_to_entity_marks_naive_timestamps_as_utc():
    model = UserModel(id=1, email="a@example.com")
    model.created_at = datetime(2026, 1, 1, 12, 0)
    model.updated_at = datetime(2026, 1, 2, 12, 0, tzinfo=timezone.utc)

    user = model.to_entity()

    assert user.created_at == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert user.updated_at == datetime(2026, 1, 2, 12, 0, tzinfo=timezone.utc)


def test_from_entity_leaves_identity_and_timestamps_to_database():
    model = UserModel.from_entity(User(email="a@example.com", name="Alice"))

    assert model.email == "a@example.com"
    assert model.name == "Alice"
    assert model.id is None
    assert model.created_at is None


def test_table_rejects_blank_email_and_name():
    constraint_names = {c.name for c in UserModel.__table__.constraints}

    assert {"ck_users_email_not_blank", "ck_users_name_not_blank"} <= constraint_names
