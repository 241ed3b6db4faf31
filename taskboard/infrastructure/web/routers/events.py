"""
Outbound event router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from taskboard.application.dto.event_dto import EventRequestDTO
from taskboard.application.use_cases.event_use_cases import SendEventUseCase
from taskboard.domain.services.webhook_service import WebhookSender
from taskboard.infrastructure.webhooks.webhook_client import get_webhook_sender


router = APIRouter()


@router.post("", status_code=status.HTTP_200_OK)
def send_event(
    body: EventRequestDTO,
    sender: Annotated[WebhookSender, Depends(get_webhook_sender)]
):
    """
    Forward a message to the configured webhook endpoint.

    Responds with an empty 200 once the endpoint accepted the event,
    or 502 if delivery failed or timed out.
    """
    SendEventUseCase(sender).execute(body)
    return Response(status_code=status.HTTP_200_OK)
