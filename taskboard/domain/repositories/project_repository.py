"""
Project repository interface.
Defines the contract for project data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.project import Project


class ProjectRepository(ABC):
    """
    Repository interface for Project aggregate.
    Projects returned by reads carry their owner snapshot.
    """

    @abstractmethod
    def save(self, project: Project) -> Project:
        """
        Insert or update a project.
        Raises DuplicateEntityError if the (owner, name) constraint rejects the write.
        """
        pass

    @abstractmethod
    def get_by_id(self, project_id: int) -> Optional[Project]:
        """
        Find a project by its ID, with its owner loaded.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def exists_by_id(self, project_id: int) -> bool:
        pass

    @abstractmethod
    def exists_by_owner_and_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """
        Check if the owner already has a project with this name, ignoring case.
        ``exclude_id`` leaves the project being updated out of the check.
        """
        pass

    @abstractmethod
    def exists_by_owner(self, owner_id: int) -> bool:
        """
        Check if the user owns at least one project.
        """
        pass

    @abstractmethod
    def list(self, page_request: PageRequest) -> Page[Project]:
        """
        Return one page of projects ordered by id descending.
        """
        pass

    @abstractmethod
    def delete(self, project_id: int) -> bool:
        """
        Delete a project by ID.
        Returns True if successful, False if project not found.
        """
        pass
