"""
Task use cases for the application layer.
Implements business logic for task operations.
"""

import logging

from taskboard.application.dto.task_dto import (
    CreateTaskRequestDTO, CreateTaskForProjectRequestDTO,
    UpdateTaskRequestDTO, ListTasksRequestDTO
)
from taskboard.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from taskboard.domain.models.base import EntityNotFoundError
from taskboard.domain.models.page import Page
from taskboard.domain.models.project import Project
from taskboard.domain.models.task import Task
from taskboard.domain.repositories.project_repository import ProjectRepository
from taskboard.domain.repositories.task_repository import TaskRepository
from taskboard.domain.services.uniqueness_service import UniquenessService


logger = logging.getLogger(__name__)


def _get_project_or_raise(project_repository: ProjectRepository, project_id: int) -> Project:
    project = project_repository.get_by_id(project_id)
    if not project:
        logger.warning(f"Project not found: id={project_id}")
        raise EntityNotFoundError("Project", project_id)
    return project


class CreateTaskForProjectUseCase(CommandUseCase[Task]):
    """
    Use case for creating a task in a project given out of band.
    Missing status and priority default to TODO and MEDIUM.
    """

    def __init__(self, task_repository: TaskRepository, project_repository: ProjectRepository):
        self.task_repository = task_repository
        self.project_repository = project_repository
        self.uniqueness = UniquenessService(task_repository=task_repository)

    def _execute_business_logic(
        self,
        project_id: int,
        request: CreateTaskForProjectRequestDTO
    ) -> Task:
        logger.info(f"Attempting to create task with title='{request.title}' in projectId={project_id}")

        project = _get_project_or_raise(self.project_repository, project_id)
        self.uniqueness.ensure_task_title_available(project.id, request.title)

        task = Task.create(
            title=request.title,
            project=project,
            description=request.description,
            status=request.status,
            priority=request.priority,
            due_date=request.due_date
        )
        saved = self.task_repository.save(task)

        logger.info(f"Task created: id={saved.id}")
        return saved


class CreateTaskUseCase(CommandUseCase[Task]):
    """Use case for creating a task; the project id travels in the request body."""

    def __init__(self, task_repository: TaskRepository, project_repository: ProjectRepository):
        self.create_for_project = CreateTaskForProjectUseCase(task_repository, project_repository)

    def _execute_business_logic(self, request: CreateTaskRequestDTO) -> Task:
        return self.create_for_project.execute(request.project_id, request)


class GetTaskByIdUseCase(QueryUseCase[Task]):
    """Use case for fetching a task with its project and owner."""

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def _execute_business_logic(self, task_id: int) -> Task:
        task = self.task_repository.get_by_id(task_id)
        if not task:
            logger.warning(f"Task not found: {task_id}")
            raise EntityNotFoundError("Task", task_id)
        return task


class ListTasksUseCase(QueryUseCase[Page[Task]]):
    """
    Use case for the filtered task listing.
    Only the supplied filters constrain the scan; they are combined with AND.
    """

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def _execute_business_logic(self, request: ListTasksRequestDTO) -> Page[Task]:
        return self.task_repository.find_page(request.to_filter(), request.to_page_request())


class UpdateTaskUseCase(CommandUseCase[Task]):
    """
    Use case for fully replacing a task, including moving it to another project.
    Any status may follow any other.
    """

    def __init__(self, task_repository: TaskRepository, project_repository: ProjectRepository):
        self.task_repository = task_repository
        self.project_repository = project_repository
        self.uniqueness = UniquenessService(task_repository=task_repository)

    def _execute_business_logic(self, task_id: int, request: UpdateTaskRequestDTO) -> Task:
        logger.info(f"Attempting to update task id={task_id}")

        task = self.task_repository.get_by_id(task_id)
        if not task:
            logger.warning(f"Task not found: {task_id}")
            raise EntityNotFoundError("Task", task_id)

        project = _get_project_or_raise(self.project_repository, request.project_id)
        self.uniqueness.ensure_task_title_available(
            project.id, request.title, exclude_id=task_id
        )

        task.replace(
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
            due_date=request.due_date,
            project=project
        )
        updated = self.task_repository.save(task)

        logger.info(f"Task updated: id={updated.id}")
        return updated


class DeleteTaskUseCase(CommandUseCase[None]):
    """Use case for deleting a task."""

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def _execute_business_logic(self, task_id: int) -> None:
        if not self.task_repository.exists_by_id(task_id):
            logger.warning(f"Task not found: id={task_id}")
            raise EntityNotFoundError("Task", task_id)

        self.task_repository.delete(task_id)
        logger.info(f"Task deleted: id={task_id}")
