"""
Project use cases for the application layer.
Implements business logic for project operations.
"""

import logging

from taskboard.application.dto.project_dto import ProjectRequestDTO
from taskboard.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from taskboard.domain.models.base import EntityNotFoundError, BusinessRuleViolation
from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.project import Project
from taskboard.domain.models.user import User
from taskboard.domain.repositories.project_repository import ProjectRepository
from taskboard.domain.repositories.task_repository import TaskRepository
from taskboard.domain.repositories.user_repository import UserRepository
from taskboard.domain.services.uniqueness_service import UniquenessService


logger = logging.getLogger(__name__)


def _get_owner_or_raise(user_repository: UserRepository, owner_id: int) -> User:
    owner = user_repository.get_by_id(owner_id)
    if not owner:
        logger.warning(f"Owner not found: id={owner_id}")
        raise EntityNotFoundError("User", owner_id)
    return owner


def _get_project_or_raise(project_repository: ProjectRepository, project_id: int) -> Project:
    project = project_repository.get_by_id(project_id)
    if not project:
        logger.warning(f"Project not found: id={project_id}")
        raise EntityNotFoundError("Project", project_id)
    return project


class CreateProjectUseCase(CommandUseCase[Project]):
    """Use case for creating a new project."""

    def __init__(self, project_repository: ProjectRepository, user_repository: UserRepository):
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.uniqueness = UniquenessService(project_repository=project_repository)

    def _execute_business_logic(self, request: ProjectRequestDTO) -> Project:
        logger.info(
            f"Attempting to create project with name='{request.name}' for ownerId={request.owner_id}"
        )

        owner = _get_owner_or_raise(self.user_repository, request.owner_id)
        self.uniqueness.ensure_project_name_available(owner.id, request.name)

        project = Project.create(
            name=request.name,
            owner=owner,
            description=request.description
        )
        saved = self.project_repository.save(project)

        logger.info(f"Project created: id={saved.id}")
        return saved


class GetProjectByIdUseCase(QueryUseCase[Project]):
    """Use case for fetching a project with its owner."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def _execute_business_logic(self, project_id: int) -> Project:
        return _get_project_or_raise(self.project_repository, project_id)


class ListProjectsUseCase(QueryUseCase[Page[Project]]):
    """Use case for listing projects, newest first."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def _execute_business_logic(self, page_request: PageRequest) -> Page[Project]:
        return self.project_repository.list(page_request)


class UpdateProjectUseCase(CommandUseCase[Project]):
    """
    Use case for fully replacing a project.
    Ownership may move to another user; the name must stay unique for the new owner.
    """

    def __init__(self, project_repository: ProjectRepository, user_repository: UserRepository):
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.uniqueness = UniquenessService(project_repository=project_repository)

    def _execute_business_logic(self, project_id: int, request: ProjectRequestDTO) -> Project:
        logger.info(f"Attempting to update project id={project_id}")

        project = _get_project_or_raise(self.project_repository, project_id)
        owner = _get_owner_or_raise(self.user_repository, request.owner_id)

        self.uniqueness.ensure_project_name_available(
            owner.id, request.name, exclude_id=project_id
        )

        project.replace(name=request.name, description=request.description, owner=owner)
        updated = self.project_repository.save(project)

        logger.info(f"Project updated: id={updated.id}")
        return updated


class DeleteProjectUseCase(CommandUseCase[None]):
    """Use case for deleting a project that holds no tasks."""

    def __init__(self, project_repository: ProjectRepository, task_repository: TaskRepository):
        self.project_repository = project_repository
        self.task_repository = task_repository

    def _execute_business_logic(self, project_id: int) -> None:
        if not self.project_repository.exists_by_id(project_id):
            logger.warning(f"Project not found: id={project_id}")
            raise EntityNotFoundError("Project", project_id)

        if self.task_repository.exists_by_project(project_id):
            logger.warning(f"Project id={project_id} still has tasks, delete refused")
            raise BusinessRuleViolation(f"Project {project_id} still has tasks")

        self.project_repository.delete(project_id)
        logger.info(f"Project deleted: id={project_id}")
