"""
Outbound webhook delivery.
"""

from .webhook_client import RequestsWebhookSender, get_webhook_sender, close_http_session

__all__ = [
    "RequestsWebhookSender",
    "get_webhook_sender",
    "close_http_session",
]
