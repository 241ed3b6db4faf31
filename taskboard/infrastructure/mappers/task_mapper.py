"""
Task mapper for converting between domain entities and database models.
"""

from taskboard.domain.models.task import Task, TaskStatus, TaskPriority
from taskboard.infrastructure.db.models import TaskModel
from taskboard.infrastructure.mappers.project_mapper import ProjectMapper


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def __init__(self):
        self.project_mapper = ProjectMapper()

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to a new TaskModel."""
        model = TaskModel(
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            project_id=task.project_id
        )
        if task.id is not None:
            model.id = task.id
        if task.created_at is not None:
            model.created_at = task.created_at
        return model

    def update_model(self, model: TaskModel, task: Task) -> TaskModel:
        """Copy the mutable fields of the entity onto a loaded model."""
        model.title = task.title
        model.description = task.description
        model.status = task.status
        model.priority = task.priority
        model.due_date = task.due_date
        model.project_id = task.project_id
        return model

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity, with its project when loaded."""
        project = (
            self.project_mapper.model_to_domain(model.project)
            if model.project is not None else None
        )
        return Task(
            id=model.id,
            created_at=model.created_at,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status),
            priority=TaskPriority(model.priority),
            due_date=model.due_date,
            project_id=model.project_id,
            project=project
        )
