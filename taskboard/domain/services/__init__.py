"""
Domain services for the taskboard.
"""

from .uniqueness_service import UniquenessService
from .webhook_service import WebhookEvent, WebhookSender

__all__ = [
    "UniquenessService",
    "WebhookEvent",
    "WebhookSender",
]
