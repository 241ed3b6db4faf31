"""
User management router.
"""

from fastapi import APIRouter, Request, Response, status

from taskboard.application.dto.base_dto import PageResponseDTO
from taskboard.application.dto.user_dto import (
    CreateUserRequestDTO,
    UpdateUserRequestDTO,
    UserResponseDTO
)
from taskboard.application.use_cases.user_use_cases import (
    CreateUserUseCase,
    GetUserByIdUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase
)
from taskboard.domain.models.page import PageRequest
from taskboard.infrastructure.web.dependencies import UserRepositoryDep, ProjectRepositoryDep
from taskboard.infrastructure.web.routers.pagination import PageQuery, SizeQuery, DEFAULT_PAGE_SIZE


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponseDTO)
def create_user(
    body: CreateUserRequestDTO,
    request: Request,
    response: Response,
    repository: UserRepositoryDep
):
    """
    Register a user.

    - **name**: Display name (required)
    - **email**: Email address, unique ignoring case (required)
    """
    user = CreateUserUseCase(repository).execute(body)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return UserResponseDTO.from_domain(user)


@router.get("/{user_id}", response_model=UserResponseDTO)
def get_user(user_id: int, repository: UserRepositoryDep):
    """Get a user by id."""
    user = GetUserByIdUseCase(repository).execute(user_id)
    return UserResponseDTO.from_domain(user)


@router.get("", response_model=PageResponseDTO[UserResponseDTO])
def list_users(
    repository: UserRepositoryDep,
    page: PageQuery = 0,
    size: SizeQuery = DEFAULT_PAGE_SIZE
):
    """List users, newest first."""
    result = ListUsersUseCase(repository).execute(PageRequest(page=page, size=size))
    return PageResponseDTO[UserResponseDTO].from_page(result, UserResponseDTO.from_domain)


@router.put("/{user_id}", response_model=UserResponseDTO)
def update_user(user_id: int, body: UpdateUserRequestDTO, repository: UserRepositoryDep):
    """Replace a user's name and email."""
    user = UpdateUserUseCase(repository).execute(user_id, body)
    return UserResponseDTO.from_domain(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    repository: UserRepositoryDep,
    project_repository: ProjectRepositoryDep
):
    """Delete a user who owns no projects."""
    DeleteUserUseCase(repository, project_repository).execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
