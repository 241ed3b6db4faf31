"""
Composable task filter predicates.

Each builder returns a SQL boolean expression. A builder given no value
returns the always-true predicate, so absent filters drop out of the
conjunction and ``all_of`` over nothing is an unrestricted scan.
"""

from typing import Optional

from sqlalchemy import and_, true
from sqlalchemy.sql import ColumnElement

from taskboard.domain.models.task import TaskStatus, TaskPriority
from taskboard.domain.repositories.task_repository import TaskFilter
from taskboard.infrastructure.db.models import TaskModel


def match_all() -> ColumnElement:
    return true()


def has_status(status: Optional[TaskStatus]) -> ColumnElement:
    if status is None:
        return match_all()
    return TaskModel.status == status


def has_priority(priority: Optional[TaskPriority]) -> ColumnElement:
    if priority is None:
        return match_all()
    return TaskModel.priority == priority


def has_project_id(project_id: Optional[int]) -> ColumnElement:
    if project_id is None:
        return match_all()
    return TaskModel.project_id == project_id


def all_of(*predicates: ColumnElement) -> ColumnElement:
    """Conjunction of the given predicates; true when none are given."""
    return and_(match_all(), *predicates)


def matching(task_filter: TaskFilter) -> ColumnElement:
    """Predicate for every supplied field of the filter."""
    return all_of(
        has_status(task_filter.status),
        has_priority(task_filter.priority),
        has_project_id(task_filter.project_id)
    )
