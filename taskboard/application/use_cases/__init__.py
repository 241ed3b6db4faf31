"""
Application use cases module.
One class per operation; each exposes ``execute``.
"""

from .base_use_case import BaseUseCase, QueryUseCase, CommandUseCase
from .user_use_cases import (
    CreateUserUseCase,
    GetUserByIdUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase
)
from .project_use_cases import (
    CreateProjectUseCase,
    GetProjectByIdUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase
)
from .task_use_cases import (
    CreateTaskUseCase,
    CreateTaskForProjectUseCase,
    GetTaskByIdUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase
)
from .event_use_cases import SendEventUseCase

__all__ = [
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateUserUseCase",
    "GetUserByIdUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "CreateProjectUseCase",
    "GetProjectByIdUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "CreateTaskUseCase",
    "CreateTaskForProjectUseCase",
    "GetTaskByIdUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "SendEventUseCase",
]
