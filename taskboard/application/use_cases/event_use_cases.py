"""
Outbound event use case.
"""

import logging

from taskboard.application.dto.event_dto import EventRequestDTO
from taskboard.application.use_cases.base_use_case import CommandUseCase
from taskboard.domain.services.webhook_service import WebhookEvent, WebhookSender


logger = logging.getLogger(__name__)


class SendEventUseCase(CommandUseCase[None]):
    """
    Forward a message to the configured webhook endpoint.
    Never touches the store; delivery failures propagate as WebhookDeliveryError.
    """

    def __init__(self, webhook_sender: WebhookSender):
        self.webhook_sender = webhook_sender

    def _execute_business_logic(self, request: EventRequestDTO) -> None:
        event = WebhookEvent.create(
            message=request.message,
            source=request.source,
            type=request.type
        )
        logger.info(f"Dispatching event id={event.id} source={event.source} type={event.type}")
        self.webhook_sender.send(event)
