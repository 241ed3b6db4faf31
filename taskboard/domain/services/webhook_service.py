"""
Webhook event payload and the outbound sender port.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


DEFAULT_SOURCE = "taskboard-api"
DEFAULT_TYPE = "CUSTOM_EVENT"


def _or_default(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


@dataclass(frozen=True)
class WebhookEvent:
    """Immutable event delivered to the external endpoint."""

    id: str
    source: str
    type: str
    message: str
    created_at: datetime

    @classmethod
    def create(
        cls,
        message: str,
        source: Optional[str] = None,
        type: Optional[str] = None
    ) -> "WebhookEvent":
        """
        Build a new event with a fresh id and the current UTC time.
        Blank source and type fall back to fixed defaults; the message is kept verbatim.
        """
        return cls(
            id=str(uuid.uuid4()),
            source=_or_default(source, DEFAULT_SOURCE),
            type=_or_default(type, DEFAULT_TYPE),
            message=message,
            created_at=datetime.now(timezone.utc)
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body sent to the webhook endpoint."""
        return {
            "id": self.id,
            "source": self.source,
            "type": self.type,
            "message": self.message,
            "createdAt": self.created_at.isoformat()
        }


class WebhookSender(ABC):
    """
    Outbound webhook port.
    Implementations make a single bounded attempt and raise
    WebhookDeliveryError on any failure.
    """

    @abstractmethod
    def send(self, event: WebhookEvent) -> None:
        pass
