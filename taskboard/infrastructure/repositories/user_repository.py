"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from taskboard.domain.models.base import DuplicateEntityError, EntityNotFoundError, BusinessRuleViolation
from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.user import User
from taskboard.domain.repositories.user_repository import UserRepository as UserRepositoryInterface
from taskboard.infrastructure.db.models import UserModel
from taskboard.infrastructure.mappers.user_mapper import UserMapper
from taskboard.infrastructure.pagination import OffsetPagination
from taskboard.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository, UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = UserMapper()
        self.paginator = OffsetPagination()

    def save(self, user: User) -> User:
        """Insert a new user or update an existing one."""
        with self.reading("user save"):
            if user.is_new:
                model = self.mapper.domain_to_model(user)
                self.session.add(model)
            else:
                model = self.session.get(UserModel, user.id)
                if not model:
                    raise EntityNotFoundError("User", user.id)
                self.mapper.update_model(model, user)

        self.commit(
            "user save",
            lambda: DuplicateEntityError("User", "email", user.email)
        )

        with self.reading("user save"):
            return self.mapper.model_to_domain(model)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        with self.reading("user lookup"):
            model = self.session.get(UserModel, user_id)
            if not model:
                return None
            return self.mapper.model_to_domain(model)

    def exists_by_id(self, user_id: int) -> bool:
        with self.reading("user lookup"):
            return self.session.query(
                self.session.query(UserModel).filter(UserModel.id == user_id).exists()
            ).scalar()

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check if email is already taken, ignoring case."""
        with self.reading("user email check"):
            query = self.session.query(UserModel).filter(
                func.lower(UserModel.email) == email.lower()
            )
            if exclude_id is not None:
                query = query.filter(UserModel.id != exclude_id)
            return self.session.query(query.exists()).scalar()

    def list(self, page_request: PageRequest) -> Page[User]:
        """List users, newest id first."""
        with self.reading("user listing"):
            query = self.session.query(UserModel)
            return self.paginator.paginate(
                query,
                page_request,
                order_by=desc(UserModel.id),
                transform=self.mapper.model_to_domain
            )

    def delete(self, user_id: int) -> bool:
        """Delete user by ID."""
        with self.reading("user delete"):
            model = self.session.get(UserModel, user_id)
            if not model:
                return False
            self.session.delete(model)

        self.commit(
            "user delete",
            lambda: BusinessRuleViolation(f"User {user_id} still owns projects")
        )
        return True
