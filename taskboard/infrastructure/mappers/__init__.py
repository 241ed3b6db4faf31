"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper
from .project_mapper import ProjectMapper
from .task_mapper import TaskMapper

__all__ = [
    "UserMapper",
    "ProjectMapper",
    "TaskMapper",
]
