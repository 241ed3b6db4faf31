"""
Uniqueness checks for the scoped natural keys of each aggregate.

These checks reject duplicates early with a readable message. The unique
indexes in the store remain the final authority under concurrent writers.
"""

import logging
from typing import Optional

from taskboard.domain.models.base import DuplicateEntityError
from taskboard.domain.repositories.user_repository import UserRepository
from taskboard.domain.repositories.project_repository import ProjectRepository
from taskboard.domain.repositories.task_repository import TaskRepository


logger = logging.getLogger(__name__)


class UniquenessService:
    """Asks the store whether a conflicting record exists within a scope."""

    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        project_repository: Optional[ProjectRepository] = None,
        task_repository: Optional[TaskRepository] = None
    ):
        self.user_repository = user_repository
        self.project_repository = project_repository
        self.task_repository = task_repository

    def ensure_email_available(self, email: str, exclude_id: Optional[int] = None) -> None:
        """Global scope: no other user may hold the email."""
        if self.user_repository.exists_by_email(email, exclude_id=exclude_id):
            logger.warning(f"Duplicate user email '{email}'")
            raise DuplicateEntityError("User", "email", email)

    def ensure_project_name_available(
        self,
        owner_id: int,
        name: str,
        exclude_id: Optional[int] = None
    ) -> None:
        """Owner scope: project names are unique per owner."""
        if self.project_repository.exists_by_owner_and_name(owner_id, name, exclude_id=exclude_id):
            logger.warning(f"Duplicate project name '{name}' for ownerId={owner_id}")
            raise DuplicateEntityError("Project", "name", name, scope=f"for owner {owner_id}")

    def ensure_task_title_available(
        self,
        project_id: int,
        title: str,
        exclude_id: Optional[int] = None
    ) -> None:
        """Project scope: task titles are unique per project."""
        if self.task_repository.exists_by_project_and_title(project_id, title, exclude_id=exclude_id):
            logger.warning(f"Duplicate task title '{title}' in projectId={project_id}")
            raise DuplicateEntityError("Task", "title", title, scope=f"in project {project_id}")
