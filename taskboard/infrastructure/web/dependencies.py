"""
FastAPI dependency providers for repositories and use cases.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from taskboard.infrastructure.db.database import get_db
from taskboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from taskboard.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from taskboard.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository


def get_user_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyUserRepository:
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


def get_project_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyProjectRepository:
    """Dependency to get project repository."""
    return SQLAlchemyProjectRepository(session)


def get_task_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyTaskRepository:
    """Dependency to get task repository."""
    return SQLAlchemyTaskRepository(session)


UserRepositoryDep = Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
ProjectRepositoryDep = Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
TaskRepositoryDep = Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
