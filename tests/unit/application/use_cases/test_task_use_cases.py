"""
Unit tests for task use cases.
"""

from datetime import date

import pytest
from unittest.mock import Mock

from taskboard.application.dto.task_dto import (
    CreateTaskRequestDTO,
    CreateTaskForProjectRequestDTO,
    UpdateTaskRequestDTO,
    ListTasksRequestDTO
)
from taskboard.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    CreateTaskForProjectUseCase,
    GetTaskByIdUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase
)
from taskboard.domain.models.base import DuplicateEntityError, EntityNotFoundError
from taskboard.domain.models.project import Project
from taskboard.domain.models.task import TaskStatus, TaskPriority
from taskboard.domain.models.user import User
from taskboard.domain.repositories.project_repository import ProjectRepository
from taskboard.domain.repositories.task_repository import TaskRepository


@pytest.fixture
def owner(user_repository):
    return user_repository.save(User.create(name="Alice", email="alice@example.com"))


@pytest.fixture
def apollo(project_repository, owner):
    return project_repository.save(Project.create(name="Apollo", owner=owner))


@pytest.fixture
def gemini(project_repository, owner):
    return project_repository.save(Project.create(name="Gemini", owner=owner))


@pytest.fixture
def create_task(task_repository, project_repository):
    use_case = CreateTaskUseCase(task_repository, project_repository)

    def _create(title, project_id, **fields):
        return use_case.execute(CreateTaskRequestDTO(title=title, project_id=project_id, **fields))

    return _create


class TestCreateTask:

    def test_defaults_todo_and_medium(self, create_task, apollo):
        task = create_task("Design", apollo.id)

        assert task.status == TaskStatus.TODO
        assert task.priority == TaskPriority.MEDIUM
        assert task.project.name == "Apollo"

    def test_supplied_status_and_priority_kept(self, create_task, apollo):
        task = create_task(
            "Design", apollo.id,
            status=TaskStatus.DOING, priority=TaskPriority.HIGH, due_date=date(2030, 5, 1)
        )

        assert task.status == TaskStatus.DOING
        assert task.priority == TaskPriority.HIGH
        assert task.due_date == date(2030, 5, 1)

    def test_missing_project_creates_nothing(self, create_task, task_repository):
        with pytest.raises(EntityNotFoundError, match="Project not found: 999"):
            create_task("Orphan", 999)

        empty = ListTasksRequestDTO()
        assert task_repository.find_page(empty.to_filter(), empty.to_page_request()).total_elements == 0

    def test_title_unique_per_project_ignoring_case(self, create_task, apollo, gemini):
        create_task("Design", apollo.id)
        create_task("design", gemini.id)

        with pytest.raises(DuplicateEntityError, match=f"in project {apollo.id}"):
            create_task("DESIGN", apollo.id)

    def test_create_for_project_uses_path_id(self, task_repository, project_repository, apollo):
        use_case = CreateTaskForProjectUseCase(task_repository, project_repository)

        task = use_case.execute(apollo.id, CreateTaskForProjectRequestDTO(title="Build"))

        assert task.project_id == apollo.id
        assert task.status == TaskStatus.TODO

    def test_missing_project_never_saves(self):
        """The repository is not written when the project lookup fails."""
        task_repository = Mock(spec=TaskRepository)
        project_repository = Mock(spec=ProjectRepository)
        project_repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            CreateTaskUseCase(task_repository, project_repository).execute(
                CreateTaskRequestDTO(title="Orphan", project_id=1)
            )

        task_repository.save.assert_not_called()


class TestReadTasks:

    def test_get_embeds_project_and_owner(self, create_task, task_repository, apollo):
        task = create_task("Design", apollo.id)

        fetched = GetTaskByIdUseCase(task_repository).execute(task.id)

        assert fetched.project.id == apollo.id
        assert fetched.project.owner.name == "Alice"

    def test_get_missing_task(self, task_repository):
        with pytest.raises(EntityNotFoundError, match="Task not found: 3"):
            GetTaskByIdUseCase(task_repository).execute(3)

    def test_list_without_filters_returns_everything(self, create_task, task_repository, apollo, gemini):
        create_task("a", apollo.id)
        create_task("b", gemini.id, status=TaskStatus.DONE)

        page = ListTasksUseCase(task_repository).execute(ListTasksRequestDTO())

        assert [t.title for t in page.content] == ["b", "a"]
        assert page.total_elements == 2

    def test_list_with_filters(self, create_task, task_repository, apollo, gemini):
        create_task("a", apollo.id, priority=TaskPriority.HIGH)
        create_task("b", apollo.id, priority=TaskPriority.LOW)
        create_task("c", gemini.id, priority=TaskPriority.HIGH)

        page = ListTasksUseCase(task_repository).execute(
            ListTasksRequestDTO(priority=TaskPriority.HIGH, project_id=apollo.id)
        )

        assert [t.title for t in page.content] == ["a"]


class TestUpdateTask:

    def _update(self, task_repository, project_repository, task_id, **fields):
        body = {
            "title": "Design",
            "status": TaskStatus.TODO,
            "priority": TaskPriority.MEDIUM,
        }
        body.update(fields)
        return UpdateTaskUseCase(task_repository, project_repository).execute(
            task_id, UpdateTaskRequestDTO(**body)
        )

    def test_rename_collision(self, create_task, task_repository, project_repository, apollo):
        create_task("A", apollo.id)
        second = create_task("B", apollo.id)

        with pytest.raises(DuplicateEntityError):
            self._update(task_repository, project_repository, second.id, title="a", project_id=apollo.id)

    def test_done_back_to_todo(self, create_task, task_repository, project_repository, apollo):
        task = create_task("A", apollo.id, status=TaskStatus.DONE)

        updated = self._update(
            task_repository, project_repository, task.id,
            title="A", status=TaskStatus.TODO, project_id=apollo.id
        )

        assert updated.status == TaskStatus.TODO

    def test_move_to_other_project(self, create_task, task_repository, project_repository, apollo, gemini):
        task = create_task("A", apollo.id)

        updated = self._update(task_repository, project_repository, task.id, title="A", project_id=gemini.id)

        assert updated.project_id == gemini.id
        assert GetTaskByIdUseCase(task_repository).execute(task.id).project.name == "Gemini"

    def test_missing_task(self, task_repository, project_repository, apollo):
        with pytest.raises(EntityNotFoundError, match="Task not found"):
            self._update(task_repository, project_repository, 404, project_id=apollo.id)

    def test_missing_target_project(self, create_task, task_repository, project_repository, apollo):
        task = create_task("A", apollo.id)

        with pytest.raises(EntityNotFoundError, match="Project not found"):
            self._update(task_repository, project_repository, task.id, project_id=999)


class TestDeleteTask:

    def test_delete(self, create_task, task_repository, apollo):
        task = create_task("A", apollo.id)

        DeleteTaskUseCase(task_repository).execute(task.id)

        assert not task_repository.exists_by_id(task.id)

    def test_delete_missing(self, task_repository):
        with pytest.raises(EntityNotFoundError):
            DeleteTaskUseCase(task_repository).execute(1)
