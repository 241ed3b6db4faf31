"""
Shared fixtures: a fresh in-memory SQLite database per test and a
TestClient wired to it, with the webhook sender replaced by a mock.
"""

import os

# Must be set before taskboard.config is first read
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from taskboard.domain.services.webhook_service import WebhookSender
from taskboard.infrastructure.db.database import create_db_engine, create_session_factory, get_db
from taskboard.infrastructure.db.models import create_all_tables
from taskboard.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyTaskRepository
)
from taskboard.infrastructure.webhooks.webhook_client import get_webhook_sender
from taskboard.main import app


@pytest.fixture
def engine():
    db_engine = create_db_engine("sqlite://")
    create_all_tables(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def user_repository(session):
    return SQLAlchemyUserRepository(session)


@pytest.fixture
def project_repository(session):
    return SQLAlchemyProjectRepository(session)


@pytest.fixture
def task_repository(session):
    return SQLAlchemyTaskRepository(session)


@pytest.fixture
def webhook_sender():
    return Mock(spec=WebhookSender)


@pytest.fixture
def client(session_factory, webhook_sender):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_webhook_sender] = lambda: webhook_sender

    yield TestClient(app)

    app.dependency_overrides.clear()
