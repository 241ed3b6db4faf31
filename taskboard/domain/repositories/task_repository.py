"""
Task repository interface.
Defines the contract for task data persistence operations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.task import Task, TaskStatus, TaskPriority


@dataclass(frozen=True)
class TaskFilter:
    """
    Optional listing filters. Each absent value places no constraint;
    present values are combined with AND.
    """

    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    project_id: Optional[int] = None


class TaskRepository(ABC):
    """
    Repository interface for Task entity.
    Tasks returned by reads carry their project, which carries its owner.
    """

    @abstractmethod
    def save(self, task: Task) -> Task:
        """
        Insert or update a task.
        Raises DuplicateEntityError if the (project, title) constraint rejects the write.
        """
        pass

    @abstractmethod
    def get_by_id(self, task_id: int) -> Optional[Task]:
        """
        Find a task by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def exists_by_id(self, task_id: int) -> bool:
        pass

    @abstractmethod
    def exists_by_project_and_title(
        self,
        project_id: int,
        title: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """
        Check if the project already has a task with this title, ignoring case.
        ``exclude_id`` leaves the task being updated out of the check.
        """
        pass

    @abstractmethod
    def exists_by_project(self, project_id: int) -> bool:
        """
        Check if the project holds at least one task.
        """
        pass

    @abstractmethod
    def find_page(self, task_filter: TaskFilter, page_request: PageRequest) -> Page[Task]:
        """
        Return one page of tasks matching every supplied filter, ordered by id descending.
        An empty filter is an unrestricted scan.
        """
        pass

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """
        Delete a task by ID.
        Returns True if successful, False if task not found.
        """
        pass
