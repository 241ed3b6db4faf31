"""
Tests for the composable task filter predicates.
"""

import pytest
from sqlalchemy.sql.elements import True_

from taskboard.domain.models.page import PageRequest
from taskboard.domain.models.project import Project
from taskboard.domain.models.task import Task, TaskStatus, TaskPriority
from taskboard.domain.models.user import User
from taskboard.domain.repositories.task_repository import TaskFilter
from taskboard.infrastructure.db.models import TaskModel
from taskboard.infrastructure.repositories.task_specs import (
    all_of, has_status, has_priority, has_project_id, matching
)


@pytest.fixture
def seeded(user_repository, project_repository, task_repository):
    """Two projects with a spread of statuses and priorities."""
    owner = user_repository.save(User.create(name="Alice", email="alice@example.com"))
    apollo = project_repository.save(Project.create(name="Apollo", owner=owner))
    gemini = project_repository.save(Project.create(name="Gemini", owner=owner))

    rows = [
        ("a1", apollo, TaskStatus.TODO, TaskPriority.HIGH),
        ("a2", apollo, TaskStatus.DOING, TaskPriority.HIGH),
        ("a3", apollo, TaskStatus.TODO, TaskPriority.LOW),
        ("g1", gemini, TaskStatus.TODO, TaskPriority.HIGH),
        ("g2", gemini, TaskStatus.DONE, TaskPriority.MEDIUM),
    ]
    for title, project, status, priority in rows:
        task_repository.save(
            Task.create(title=title, project=project, status=status, priority=priority)
        )
    return apollo, gemini


def _ids(session, predicate):
    return sorted(row.id for row in session.query(TaskModel).filter(predicate).all())


class TestTaskSpecs:

    def test_absent_values_are_neutral(self):
        assert isinstance(has_status(None), True_)
        assert isinstance(has_priority(None), True_)
        assert isinstance(has_project_id(None), True_)

    def test_empty_filter_equals_unrestricted_scan(self, session, seeded):
        all_ids = sorted(row.id for row in session.query(TaskModel).all())

        assert _ids(session, matching(TaskFilter())) == all_ids
        assert _ids(session, all_of()) == all_ids

    def test_filters_combine_with_and(self, session, seeded):
        apollo, _ = seeded

        predicate = matching(TaskFilter(status=TaskStatus.TODO, priority=TaskPriority.HIGH, project_id=apollo.id))
        titles = [row.title for row in session.query(TaskModel).filter(predicate).all()]

        assert titles == ["a1"]

    def test_composition_is_associative(self, session, seeded):
        apollo, _ = seeded
        a = has_status(TaskStatus.TODO)
        b = has_priority(TaskPriority.HIGH)
        c = has_project_id(apollo.id)

        assert _ids(session, all_of(all_of(a, b), c)) == _ids(session, all_of(a, all_of(b, c)))

    def test_find_page_matches_every_supplied_filter(self, task_repository, seeded):
        page = task_repository.find_page(TaskFilter(status=TaskStatus.TODO), PageRequest(size=2))

        assert page.total_elements == 3
        assert len(page.content) == 2
        assert all(task.status == TaskStatus.TODO for task in page.content)
        # Newest first
        assert [task.title for task in page.content] == ["g1", "a3"]

    def test_find_page_past_the_end_is_empty(self, task_repository, seeded):
        page = task_repository.find_page(TaskFilter(), PageRequest(page=5, size=20))

        assert page.content == []
        assert page.total_elements == 5
