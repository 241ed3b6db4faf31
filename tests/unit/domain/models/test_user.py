"""
Unit tests for User domain model.
"""

import pytest

from taskboard.domain.models.base import ValidationError
from taskboard.domain.models.user import User


class TestUser:
    """Test cases for User domain model."""

    def test_create_user_success(self):
        """Test successful user creation."""
        user = User.create(name="Alice", email="alice@example.com")

        assert user.name == "Alice"
        assert user.email == "alice@example.com"
        assert user.id is None
        assert user.is_new

    def test_create_user_blank_name(self):
        """Test user creation with a blank name."""
        with pytest.raises(ValidationError, match="User name is required"):
            User.create(name="   ", email="alice@example.com")

    def test_create_user_name_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            User.create(name="a" * 101, email="alice@example.com")

    def test_create_user_missing_email(self):
        with pytest.raises(ValidationError) as exc_info:
            User.create(name="Alice", email="")

        assert exc_info.value.field == "email"

    def test_replace_updates_fields(self):
        """Test full replace of name and email."""
        user = User(id=1, name="Alice", email="alice@example.com")

        user.replace(name="Alicia", email="alicia@example.com")

        assert user.name == "Alicia"
        assert user.email == "alicia@example.com"
        assert user.id == 1

    def test_email_differs_ignores_case(self):
        user = User(id=1, name="Alice", email="alice@example.com")

        assert not user.email_differs_from("ALICE@example.com")
        assert user.email_differs_from("bob@example.com")

    def test_equality_by_id(self):
        """Entities with the same id are equal regardless of field values."""
        assert User(id=1, name="A", email="a@example.com") == User(id=1, name="B", email="b@example.com")
        assert User(id=1, name="A", email="a@example.com") != User(id=2, name="A", email="a@example.com")
