"""
User use cases for the application layer.
"""

import logging

from taskboard.application.dto.user_dto import CreateUserRequestDTO, UpdateUserRequestDTO
from taskboard.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from taskboard.domain.models.base import EntityNotFoundError, BusinessRuleViolation
from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.user import User
from taskboard.domain.repositories.user_repository import UserRepository
from taskboard.domain.repositories.project_repository import ProjectRepository
from taskboard.domain.services.uniqueness_service import UniquenessService


logger = logging.getLogger(__name__)


def _get_user_or_raise(user_repository: UserRepository, user_id: int) -> User:
    user = user_repository.get_by_id(user_id)
    if not user:
        logger.warning(f"User not found: id={user_id}")
        raise EntityNotFoundError("User", user_id)
    return user


class CreateUserUseCase(CommandUseCase[User]):
    """Use case for registering a new user."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository
        self.uniqueness = UniquenessService(user_repository=user_repository)

    def _execute_business_logic(self, request: CreateUserRequestDTO) -> User:
        logger.info(f"Attempting to create user with email='{request.email}'")

        self.uniqueness.ensure_email_available(request.email)

        user = self.user_repository.save(User.create(name=request.name, email=request.email))

        logger.info(f"User created: id={user.id}")
        return user


class GetUserByIdUseCase(QueryUseCase[User]):
    """Use case for fetching a single user."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def _execute_business_logic(self, user_id: int) -> User:
        return _get_user_or_raise(self.user_repository, user_id)


class ListUsersUseCase(QueryUseCase[Page[User]]):
    """Use case for listing users, newest first."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def _execute_business_logic(self, page_request: PageRequest) -> Page[User]:
        return self.user_repository.list(page_request)


class UpdateUserUseCase(CommandUseCase[User]):
    """Use case for replacing a user's name and email."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository
        self.uniqueness = UniquenessService(user_repository=user_repository)

    def _execute_business_logic(self, user_id: int, request: UpdateUserRequestDTO) -> User:
        logger.info(f"Attempting to update user id={user_id}")

        user = _get_user_or_raise(self.user_repository, user_id)

        if user.email_differs_from(request.email):
            self.uniqueness.ensure_email_available(request.email, exclude_id=user_id)

        user.replace(name=request.name, email=request.email)
        updated = self.user_repository.save(user)

        logger.info(f"User updated: id={updated.id}")
        return updated


class DeleteUserUseCase(CommandUseCase[None]):
    """Use case for deleting a user who owns no projects."""

    def __init__(self, user_repository: UserRepository, project_repository: ProjectRepository):
        self.user_repository = user_repository
        self.project_repository = project_repository

    def _execute_business_logic(self, user_id: int) -> None:
        if not self.user_repository.exists_by_id(user_id):
            logger.warning(f"User not found: id={user_id}")
            raise EntityNotFoundError("User", user_id)

        if self.project_repository.exists_by_owner(user_id):
            logger.warning(f"User id={user_id} still owns projects, delete refused")
            raise BusinessRuleViolation(f"User {user_id} still owns projects")

        self.user_repository.delete(user_id)
        logger.info(f"User deleted: id={user_id}")
