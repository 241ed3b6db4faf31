"""
Unit tests for the outbound event use case.
"""

import pytest
from unittest.mock import Mock

from taskboard.application.dto.event_dto import EventRequestDTO
from taskboard.application.use_cases.event_use_cases import SendEventUseCase
from taskboard.domain.models.base import WebhookDeliveryError
from taskboard.domain.services.webhook_service import WebhookEvent, WebhookSender


class TestSendEventUseCase:
    """Test cases for SendEventUseCase."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sender = Mock(spec=WebhookSender)
        self.use_case = SendEventUseCase(self.sender)

    def test_builds_event_with_defaults(self):
        self.use_case.execute(EventRequestDTO(message="hello"))

        self.sender.send.assert_called_once()
        event = self.sender.send.call_args.args[0]
        assert isinstance(event, WebhookEvent)
        assert event.message == "hello"
        assert event.source == "taskboard-api"
        assert event.type == "CUSTOM_EVENT"

    def test_passes_source_and_type(self):
        self.use_case.execute(EventRequestDTO(message="hi", source="ci", type="BUILD"))

        event = self.sender.send.call_args.args[0]
        assert (event.source, event.type) == ("ci", "BUILD")

    def test_delivery_failure_propagates(self):
        self.sender.send.side_effect = WebhookDeliveryError()

        with pytest.raises(WebhookDeliveryError):
            self.use_case.execute(EventRequestDTO(message="hello"))
