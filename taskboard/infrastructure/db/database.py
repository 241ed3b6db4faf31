"""
Database configuration and session management.
"""

from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from taskboard.config import get_settings


# Create declarative base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores foreign keys unless asked on every connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.
    In-memory SQLite shares a single connection so every session sees the same data.
    """
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    db_engine = create_engine(database_url, echo=echo, **kwargs)

    if db_engine.dialect.name == "sqlite":
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)

    return db_engine


def create_session_factory(db_engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine,
    )


settings = get_settings()

# Create SQLAlchemy engine
engine = create_db_engine(settings.database_url, echo=settings.debug)

# Create SessionLocal class
SessionLocal = create_session_factory(engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.
    Repositories commit their own writes; the session is always closed here.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
