"""
Project management router.
Handles CRUD operations for project resources.
"""

from fastapi import APIRouter, Request, Response, status

from taskboard.application.dto.base_dto import PageResponseDTO
from taskboard.application.dto.project_dto import ProjectRequestDTO, ProjectResponseDTO
from taskboard.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    GetProjectByIdUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase
)
from taskboard.domain.models.page import PageRequest
from taskboard.infrastructure.web.dependencies import (
    UserRepositoryDep,
    ProjectRepositoryDep,
    TaskRepositoryDep
)
from taskboard.infrastructure.web.routers.pagination import PageQuery, SizeQuery, DEFAULT_PAGE_SIZE


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
def create_project(
    body: ProjectRequestDTO,
    request: Request,
    response: Response,
    repository: ProjectRepositoryDep,
    user_repository: UserRepositoryDep
):
    """
    Create a new project.

    - **name**: Project name, unique per owner ignoring case (required)
    - **description**: Project description
    - **ownerId**: Owning user (required)
    """
    project = CreateProjectUseCase(repository, user_repository).execute(body)
    response.headers["Location"] = str(request.url_for("get_project", project_id=project.id))
    return ProjectResponseDTO.from_domain(project)


@router.get("/{project_id}", response_model=ProjectResponseDTO)
def get_project(project_id: int, repository: ProjectRepositoryDep):
    """Get a project with its owner."""
    project = GetProjectByIdUseCase(repository).execute(project_id)
    return ProjectResponseDTO.from_domain(project)


@router.get("", response_model=PageResponseDTO[ProjectResponseDTO])
def list_projects(
    repository: ProjectRepositoryDep,
    page: PageQuery = 0,
    size: SizeQuery = DEFAULT_PAGE_SIZE
):
    """List projects, newest first."""
    result = ListProjectsUseCase(repository).execute(PageRequest(page=page, size=size))
    return PageResponseDTO[ProjectResponseDTO].from_page(result, ProjectResponseDTO.from_domain)


@router.put("/{project_id}", response_model=ProjectResponseDTO)
def update_project(
    project_id: int,
    body: ProjectRequestDTO,
    repository: ProjectRepositoryDep,
    user_repository: UserRepositoryDep
):
    """Replace a project's name, description and owner."""
    project = UpdateProjectUseCase(repository, user_repository).execute(project_id, body)
    return ProjectResponseDTO.from_domain(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: int,
    repository: ProjectRepositoryDep,
    task_repository: TaskRepositoryDep
):
    """Delete a project that holds no tasks."""
    DeleteProjectUseCase(repository, task_repository).execute(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
