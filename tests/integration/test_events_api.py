"""
HTTP tests for the event endpoint and the error envelope.
"""

from fastapi.testclient import TestClient
from unittest.mock import Mock

from taskboard.domain.models.base import WebhookDeliveryError, StoreUnavailableError
from taskboard.domain.repositories.task_repository import TaskRepository
from taskboard.infrastructure.web.dependencies import get_task_repository
from taskboard.main import app


class TestEventsApi:

    def test_send_event_returns_empty_200(self, client, webhook_sender):
        response = client.post("/api/events", json={"message": "deployed", "source": "ci"})

        assert response.status_code == 200
        assert response.content == b""
        event = webhook_sender.send.call_args.args[0]
        assert event.message == "deployed"
        assert event.source == "ci"
        assert event.type == "CUSTOM_EVENT"

    def test_blank_message_is_400(self, client, webhook_sender):
        response = client.post("/api/events", json={"message": " "})

        assert response.status_code == 400
        webhook_sender.send.assert_not_called()

    def test_delivery_failure_is_502(self, client, webhook_sender):
        webhook_sender.send.side_effect = WebhookDeliveryError()

        response = client.post("/api/events", json={"message": "hello"})

        assert response.status_code == 502
        body = response.json()
        assert body["error"] == "Bad Gateway"
        assert body["message"] == "Failed to send webhook event"


class TestErrorEnvelope:

    def test_store_failure_is_opaque_500(self, client):
        repository = Mock(spec=TaskRepository)
        repository.get_by_id.side_effect = StoreUnavailableError("task lookup")
        app.dependency_overrides[get_task_repository] = lambda: repository

        response = client.get("/api/tasks/1")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "An unexpected error occurred"
        assert set(body) == {"timestamp", "status", "error", "message", "messages"}

    def test_unexpected_exception_is_opaque_500(self, client):
        repository = Mock(spec=TaskRepository)
        repository.get_by_id.side_effect = RuntimeError("driver exploded")
        app.dependency_overrides[get_task_repository] = lambda: repository

        response = TestClient(app, raise_server_exceptions=False).get("/api/tasks/1")

        assert response.status_code == 500
        assert "driver" not in response.text

    def test_unknown_path_uses_envelope(self, client):
        response = client.get("/api/nowhere")

        assert response.status_code == 404
        assert response.json()["status"] == 404

    def test_health(self, client):
        assert client.get("/api/health").json()["status"] == "healthy"
