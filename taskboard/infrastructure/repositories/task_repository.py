"""
Task repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session, joinedload

from taskboard.domain.models.base import DuplicateEntityError, EntityNotFoundError, BusinessRuleViolation
from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.task import Task
from taskboard.domain.repositories.task_repository import (
    TaskRepository as TaskRepositoryInterface,
    TaskFilter
)
from taskboard.infrastructure.db.models import TaskModel, ProjectModel
from taskboard.infrastructure.mappers.task_mapper import TaskMapper
from taskboard.infrastructure.pagination import OffsetPagination
from taskboard.infrastructure.repositories.base_repository import SQLAlchemyRepository
from taskboard.infrastructure.repositories.task_specs import matching


def _with_project_and_owner():
    return joinedload(TaskModel.project).joinedload(ProjectModel.owner)


class SQLAlchemyTaskRepository(SQLAlchemyRepository, TaskRepositoryInterface):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = TaskMapper()
        self.paginator = OffsetPagination()

    def save(self, task: Task) -> Task:
        """Insert a new task or update an existing one."""
        with self.reading("task save"):
            if task.is_new:
                model = self.mapper.domain_to_model(task)
                self.session.add(model)
            else:
                model = self.session.get(TaskModel, task.id)
                if not model:
                    raise EntityNotFoundError("Task", task.id)
                self.mapper.update_model(model, task)

        self.commit(
            "task save",
            lambda: DuplicateEntityError(
                "Task", "title", task.title, scope=f"in project {task.project_id}"
            ),
            lambda: EntityNotFoundError("Project", task.project_id)
        )

        with self.reading("task save"):
            return self.mapper.model_to_domain(model)

    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID, with its project and the project's owner."""
        with self.reading("task lookup"):
            model = self.session.query(TaskModel).options(
                _with_project_and_owner()
            ).filter(TaskModel.id == task_id).first()

            if not model:
                return None
            return self.mapper.model_to_domain(model)

    def exists_by_id(self, task_id: int) -> bool:
        with self.reading("task lookup"):
            return self.session.query(
                self.session.query(TaskModel).filter(TaskModel.id == task_id).exists()
            ).scalar()

    def exists_by_project_and_title(
        self,
        project_id: int,
        title: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """Check if the project already has a task with this title, ignoring case."""
        with self.reading("task title check"):
            query = self.session.query(TaskModel).filter(
                TaskModel.project_id == project_id,
                func.lower(TaskModel.title) == title.lower()
            )
            if exclude_id is not None:
                query = query.filter(TaskModel.id != exclude_id)
            return self.session.query(query.exists()).scalar()

    def exists_by_project(self, project_id: int) -> bool:
        with self.reading("task project check"):
            return self.session.query(
                self.session.query(TaskModel).filter(TaskModel.project_id == project_id).exists()
            ).scalar()

    def find_page(self, task_filter: TaskFilter, page_request: PageRequest) -> Page[Task]:
        """Filtered, paginated task scan, newest id first."""
        with self.reading("task listing"):
            query = self.session.query(TaskModel).filter(matching(task_filter))
            return self.paginator.paginate(
                query,
                page_request,
                order_by=desc(TaskModel.id),
                transform=self.mapper.model_to_domain,
                options=[_with_project_and_owner()]
            )

    def delete(self, task_id: int) -> bool:
        """Delete task by ID."""
        with self.reading("task delete"):
            model = self.session.get(TaskModel, task_id)
            if not model:
                return False
            self.session.delete(model)

        self.commit(
            "task delete",
            lambda: BusinessRuleViolation(f"Task {task_id} could not be deleted")
        )
        return True
