"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator

from taskboard.domain.models.task import (
    Task, TaskStatus, TaskPriority, TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
)
from taskboard.domain.repositories.task_repository import TaskFilter
from .base_dto import RequestDTO, ResponseDTO, PageRequestDTO, not_blank
from .project_dto import ProjectResponseDTO


class CreateTaskForProjectRequestDTO(RequestDTO):
    """
    DTO for creating a task when the project comes from the URL.
    Status and priority may be omitted and fall back to TODO and MEDIUM.
    """

    title: str = Field(max_length=TITLE_MAX_LENGTH, description="Task title, unique per project ignoring case")
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        return not_blank(v)


class CreateTaskRequestDTO(CreateTaskForProjectRequestDTO):
    """DTO for creating a task inside the given project."""

    project_id: int = Field(description="ID of the owning project")


class UpdateTaskRequestDTO(RequestDTO):
    """DTO for fully replacing a task. Status and priority are mandatory here."""

    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date] = None
    project_id: int

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        return not_blank(v)


class ListTasksRequestDTO(PageRequestDTO):
    """Pagination plus optional equality filters, combined with AND."""

    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    project_id: Optional[int] = None

    def to_filter(self) -> TaskFilter:
        return TaskFilter(
            status=self.status,
            priority=self.priority,
            project_id=self.project_id
        )


class TaskResponseDTO(ResponseDTO):
    """DTO for task responses, embedding the project and its owner."""

    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    created_at: Optional[datetime] = None
    due_date: Optional[date] = None
    project: Optional[ProjectResponseDTO] = None

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            created_at=task.created_at,
            due_date=task.due_date,
            project=ProjectResponseDTO.from_domain(task.project) if task.project else None
        )
