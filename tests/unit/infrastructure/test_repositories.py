"""
Tests for the SQLAlchemy repositories against in-memory SQLite.
"""

import pytest

from taskboard.domain.models.base import DuplicateEntityError, BusinessRuleViolation, EntityNotFoundError
from taskboard.domain.models.page import PageRequest
from taskboard.domain.models.project import Project
from taskboard.domain.models.task import Task, TaskStatus
from taskboard.domain.models.user import User


class TestUserRepository:
    """Test cases for SQLAlchemyUserRepository."""

    def test_save_assigns_id_and_created_at(self, user_repository):
        user = user_repository.save(User.create(name="Alice", email="alice@example.com"))

        assert user.id is not None
        assert user.created_at is not None
        assert user_repository.get_by_id(user.id).email == "alice@example.com"

    def test_get_by_id_missing(self, user_repository):
        assert user_repository.get_by_id(999) is None
        assert not user_repository.exists_by_id(999)

    def test_exists_by_email_ignores_case(self, user_repository):
        user = user_repository.save(User.create(name="Alice", email="alice@example.com"))

        assert user_repository.exists_by_email("ALICE@example.com")
        assert not user_repository.exists_by_email("ALICE@example.com", exclude_id=user.id)

    def test_unique_index_rejects_case_variant(self, user_repository):
        """The storage constraint holds even when the pre-check is skipped."""
        user_repository.save(User.create(name="Alice", email="alice@example.com"))

        with pytest.raises(DuplicateEntityError):
            user_repository.save(User.create(name="Other", email="Alice@example.com"))

        # Session is usable after the rollback
        assert user_repository.list(PageRequest()).total_elements == 1

    def test_list_orders_by_id_descending(self, user_repository):
        for i in range(3):
            user_repository.save(User.create(name=f"U{i}", email=f"u{i}@example.com"))

        page = user_repository.list(PageRequest(page=0, size=2))

        assert [u.name for u in page.content] == ["U2", "U1"]
        assert page.total_elements == 3
        assert page.total_pages == 2

    def test_delete_blocked_by_owned_project(self, user_repository, project_repository):
        owner = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        project_repository.save(Project.create(name="Apollo", owner=owner))

        with pytest.raises(BusinessRuleViolation):
            user_repository.delete(owner.id)

        assert user_repository.exists_by_id(owner.id)

    def test_delete_missing_returns_false(self, user_repository):
        assert user_repository.delete(12345) is False


class TestProjectRepository:
    """Test cases for SQLAlchemyProjectRepository."""

    def test_get_by_id_loads_owner(self, user_repository, project_repository):
        owner = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        saved = project_repository.save(Project.create(name="Apollo", owner=owner))

        project = project_repository.get_by_id(saved.id)

        assert project.owner.id == owner.id
        assert project.owner.email == "alice@example.com"

    def test_same_name_allowed_for_different_owners(self, user_repository, project_repository):
        alice = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        bob = user_repository.save(User.create(name="Bob", email="bob@example.com"))

        project_repository.save(Project.create(name="Apollo", owner=alice))
        project_repository.save(Project.create(name="apollo", owner=bob))

        assert project_repository.exists_by_owner_and_name(alice.id, "APOLLO")
        assert project_repository.exists_by_owner_and_name(bob.id, "Apollo")

    def test_unique_index_per_owner(self, user_repository, project_repository):
        alice = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        project_repository.save(Project.create(name="Apollo", owner=alice))

        with pytest.raises(DuplicateEntityError, match="for owner"):
            project_repository.save(Project.create(name="APOLLO", owner=alice))

    def test_missing_owner_is_not_found(self, project_repository):
        with pytest.raises(EntityNotFoundError, match="User not found: 999"):
            project_repository.save(Project(name="Apollo", owner_id=999))

    def test_update_moves_owner(self, user_repository, project_repository):
        alice = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        bob = user_repository.save(User.create(name="Bob", email="bob@example.com"))
        project = project_repository.save(Project.create(name="Apollo", owner=alice))

        project.replace(name="Apollo", description="moved", owner=bob)
        project_repository.save(project)

        reloaded = project_repository.get_by_id(project.id)
        assert reloaded.owner_id == bob.id
        assert reloaded.owner.name == "Bob"
        assert project_repository.exists_by_owner(bob.id)
        assert not project_repository.exists_by_owner(alice.id)


class TestTaskRepository:
    """Test cases for SQLAlchemyTaskRepository."""

    def test_get_by_id_loads_project_and_owner(self, user_repository, project_repository, task_repository):
        owner = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        project = project_repository.save(Project.create(name="Apollo", owner=owner))
        saved = task_repository.save(Task.create(title="Design", project=project))

        task = task_repository.get_by_id(saved.id)

        assert task.status == TaskStatus.TODO
        assert task.project.name == "Apollo"
        assert task.project.owner.name == "Alice"

    def test_unique_index_per_project(self, user_repository, project_repository, task_repository):
        owner = user_repository.save(User.create(name="Alice", email="alice@example.com"))
        first = project_repository.save(Project.create(name="Apollo", owner=owner))
        second = project_repository.save(Project.create(name="Gemini", owner=owner))

        task_repository.save(Task.create(title="Design", project=first))
        # Same title in another project is fine
        task_repository.save(Task.create(title="Design", project=second))

        with pytest.raises(DuplicateEntityError, match="in project"):
            task_repository.save(Task.create(title="DESIGN", project=first))

    def test_missing_project_is_not_found(self, task_repository):
        """A row pointing at a vanished project is reported as missing, not duplicate."""
        with pytest.raises(EntityNotFoundError, match="Project not found: 999"):
            task_repository.save(Task(title="Design", project_id=999))

        assert not task_repository.exists_by_project_and_title(999, "Design")
