"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Date, ForeignKey,
    Enum as SQLEnum, Index, func
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import relationship

from taskboard.domain.models.task import TaskStatus, TaskPriority
from .database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    """User table"""
    __tablename__ = 'app_user'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    projects = relationship("ProjectModel", back_populates="owner", passive_deletes="all")

    __table_args__ = (
        Index('uq_app_user_email_ci', func.lower(email), unique=True),
    )


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'project'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    description = Column(String(500))
    owner_id = Column(
        Integer,
        ForeignKey('app_user.id', ondelete='RESTRICT'),
        nullable=False,
        index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    owner = relationship("UserModel", back_populates="projects")
    tasks = relationship("TaskModel", back_populates="project", passive_deletes="all")

    __table_args__ = (
        Index('uq_project_owner_name_ci', owner_id, func.lower(name), unique=True),
    )


class TaskModel(Base):
    """Task table"""
    __tablename__ = 'task'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    description = Column(Text)
    status = Column(
        SQLEnum(TaskStatus, name='task_status', length=10),
        nullable=False,
        default=TaskStatus.TODO,
        index=True
    )
    priority = Column(
        SQLEnum(TaskPriority, name='task_priority', length=10),
        nullable=False,
        default=TaskPriority.MEDIUM,
        index=True
    )
    due_date = Column(Date)
    project_id = Column(
        Integer,
        ForeignKey('project.id', ondelete='RESTRICT'),
        nullable=False,
        index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    project = relationship("ProjectModel", back_populates="tasks")

    __table_args__ = (
        Index('uq_task_project_title_ci', project_id, func.lower(title), unique=True),
    )


def create_all_tables(bind: Engine) -> None:
    """Create every table and index that does not exist yet."""
    Base.metadata.create_all(bind=bind)
