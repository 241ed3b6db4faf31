"""
Task domain model.
Represents a unit of work within a project.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from enum import Enum

from taskboard.domain.models.base import BaseEntity, ValidationError
from taskboard.domain.models.project import Project


TITLE_MAX_LENGTH = 150
DESCRIPTION_MAX_LENGTH = 1000


class TaskStatus(str, Enum):
    """Task status. Any status may replace any other."""
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


class TaskPriority(str, Enum):
    """Task priority levels."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


DEFAULT_STATUS = TaskStatus.TODO
DEFAULT_PRIORITY = TaskPriority.MEDIUM


@dataclass(kw_only=True, eq=False)
class Task(BaseEntity):
    """
    Task entity.
    Belongs to one project; titles are unique per project, ignoring case.
    """

    title: str
    project_id: int
    description: Optional[str] = None
    status: TaskStatus = DEFAULT_STATUS
    priority: TaskPriority = DEFAULT_PRIORITY
    due_date: Optional[date] = None
    project: Optional[Project] = None

    def __post_init__(self):
        self.validate()

    @classmethod
    def create(
        cls,
        title: str,
        project: Project,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None,
        priority: Optional[TaskPriority] = None,
        due_date: Optional[date] = None
    ) -> "Task":
        """
        Build a new task inside an existing project.
        Absent status and priority fall back to TODO and MEDIUM.
        """
        return cls(
            title=title,
            description=description,
            status=status if status is not None else DEFAULT_STATUS,
            priority=priority if priority is not None else DEFAULT_PRIORITY,
            due_date=due_date,
            project_id=project.id,
            project=project
        )

    def validate(self) -> None:
        """Validate task state."""
        if not self.title or not self.title.strip():
            raise ValidationError("Task title is required", "title")

        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Task title too long (max {TITLE_MAX_LENGTH} characters)", "title"
            )

        if self.description and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description too long (max {DESCRIPTION_MAX_LENGTH} characters)", "description"
            )

        if self.project_id is None:
            raise ValidationError("Project ID is required", "project_id")

        if not isinstance(self.status, TaskStatus):
            raise ValidationError(f"Invalid task status: {self.status}", "status")

        if not isinstance(self.priority, TaskPriority):
            raise ValidationError(f"Invalid task priority: {self.priority}", "priority")

    def replace(
        self,
        title: str,
        description: Optional[str],
        status: TaskStatus,
        priority: TaskPriority,
        due_date: Optional[date],
        project: Project
    ) -> None:
        """Full replace of every mutable field, including the project."""
        self.title = title
        self.description = description
        self.status = status
        self.priority = priority
        self.due_date = due_date
        self.project_id = project.id
        self.project = project
        self.validate()
