"""
Application DTOs module.
Request and response shapes exchanged with the HTTP layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, PageRequestDTO, PageResponseDTO
from .user_dto import CreateUserRequestDTO, UpdateUserRequestDTO, UserResponseDTO
from .project_dto import ProjectRequestDTO, OwnerSummaryDTO, ProjectResponseDTO
from .task_dto import (
    CreateTaskRequestDTO,
    CreateTaskForProjectRequestDTO,
    UpdateTaskRequestDTO,
    ListTasksRequestDTO,
    TaskResponseDTO
)
from .event_dto import EventRequestDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "PageRequestDTO",
    "PageResponseDTO",
    "CreateUserRequestDTO",
    "UpdateUserRequestDTO",
    "UserResponseDTO",
    "ProjectRequestDTO",
    "OwnerSummaryDTO",
    "ProjectResponseDTO",
    "CreateTaskRequestDTO",
    "CreateTaskForProjectRequestDTO",
    "UpdateTaskRequestDTO",
    "ListTasksRequestDTO",
    "TaskResponseDTO",
    "EventRequestDTO",
]
