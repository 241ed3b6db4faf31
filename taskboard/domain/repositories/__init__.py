"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .user_repository import UserRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository, TaskFilter

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "TaskRepository",
    "TaskFilter",
]
