"""
Task management router.
Handles task CRUD and the filtered task listing.
"""

from typing import Optional

from fastapi import APIRouter, Query, Request, Response, status

from taskboard.application.dto.base_dto import PageResponseDTO
from taskboard.application.dto.task_dto import (
    CreateTaskRequestDTO,
    CreateTaskForProjectRequestDTO,
    UpdateTaskRequestDTO,
    ListTasksRequestDTO,
    TaskResponseDTO
)
from taskboard.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    CreateTaskForProjectUseCase,
    GetTaskByIdUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase
)
from taskboard.domain.models.task import TaskStatus, TaskPriority
from taskboard.infrastructure.web.dependencies import ProjectRepositoryDep, TaskRepositoryDep
from taskboard.infrastructure.web.routers.pagination import PageQuery, SizeQuery, DEFAULT_PAGE_SIZE


router = APIRouter()

# Mounted under /projects
project_tasks_router = APIRouter()


def _created(request: Request, response: Response, task) -> TaskResponseDTO:
    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return TaskResponseDTO.from_domain(task)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponseDTO)
def create_task(
    body: CreateTaskRequestDTO,
    request: Request,
    response: Response,
    repository: TaskRepositoryDep,
    project_repository: ProjectRepositoryDep
):
    """
    Create a task.

    - **title**: Title, unique per project ignoring case (required)
    - **projectId**: Owning project (required)
    - **status**: TODO, DOING or DONE (default TODO)
    - **priority**: LOW, MEDIUM or HIGH (default MEDIUM)
    - **dueDate**: Optional due date
    """
    task = CreateTaskUseCase(repository, project_repository).execute(body)
    return _created(request, response, task)


@project_tasks_router.post(
    "/{project_id}/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponseDTO
)
def create_task_for_project(
    project_id: int,
    body: CreateTaskForProjectRequestDTO,
    request: Request,
    response: Response,
    repository: TaskRepositoryDep,
    project_repository: ProjectRepositoryDep
):
    """Create a task in the project named by the path."""
    task = CreateTaskForProjectUseCase(repository, project_repository).execute(project_id, body)
    return _created(request, response, task)


@router.get("/{task_id}", response_model=TaskResponseDTO)
def get_task(task_id: int, repository: TaskRepositoryDep):
    """Get a task with its project and the project's owner."""
    task = GetTaskByIdUseCase(repository).execute(task_id)
    return TaskResponseDTO.from_domain(task)


@router.get("", response_model=PageResponseDTO[TaskResponseDTO])
def list_tasks(
    repository: TaskRepositoryDep,
    page: PageQuery = 0,
    size: SizeQuery = DEFAULT_PAGE_SIZE,
    task_status: Optional[TaskStatus] = Query(None, alias="status", description="Filter by status"),
    priority: Optional[TaskPriority] = Query(None, description="Filter by priority"),
    project_id: Optional[int] = Query(None, alias="projectId", description="Filter by project")
):
    """
    List tasks, newest first.
    Every supplied filter must match; omitted filters do not constrain the listing.
    """
    query = ListTasksRequestDTO(
        page=page,
        size=size,
        status=task_status,
        priority=priority,
        project_id=project_id
    )
    result = ListTasksUseCase(repository).execute(query)
    return PageResponseDTO[TaskResponseDTO].from_page(result, TaskResponseDTO.from_domain)


@router.put("/{task_id}", response_model=TaskResponseDTO)
def update_task(
    task_id: int,
    body: UpdateTaskRequestDTO,
    repository: TaskRepositoryDep,
    project_repository: ProjectRepositoryDep
):
    """Replace every field of a task. Status and priority are required."""
    task = UpdateTaskUseCase(repository, project_repository).execute(task_id, body)
    return TaskResponseDTO.from_domain(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, repository: TaskRepositoryDep):
    """Delete a task."""
    DeleteTaskUseCase(repository).execute(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
