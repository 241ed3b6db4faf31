"""
Database infrastructure for the taskboard.
"""

from .database import engine, SessionLocal, get_db, Base, create_db_engine, create_session_factory
from .models import UserModel, ProjectModel, TaskModel, create_all_tables

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "Base",
    "create_db_engine",
    "create_session_factory",
    "UserModel",
    "ProjectModel",
    "TaskModel",
    "create_all_tables",
]
