"""
HTTP webhook sender backed by requests.
"""

import logging
import time
from concurrent.futures import Executor, ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Optional

import requests

from taskboard.config import get_settings
from taskboard.domain.models.base import WebhookDeliveryError
from taskboard.domain.services.webhook_service import WebhookEvent, WebhookSender


logger = logging.getLogger(__name__)

WEBHOOK_WORKERS = 8


class RequestsWebhookSender(WebhookSender):
    """
    Posts events as JSON to a fixed endpoint.

    One attempt per event, no retries. ``timeout`` bounds the whole call:
    connecting, waiting for the status line and reading the body. requests
    alone only bounds each socket operation, so the POST runs on a worker
    and the caller stops waiting once the deadline passes.
    """

    def __init__(
        self,
        session: requests.Session,
        url: str,
        timeout: float = 5.0,
        auth_token: Optional[str] = None,
        executor: Optional[Executor] = None
    ):
        self.session = session
        self.url = url
        self.timeout = timeout
        self.auth_token = auth_token
        self.executor = executor or get_http_executor()

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    def _post(self, event: WebhookEvent, deadline: float) -> requests.Response:
        response = self.session.post(
            self.url,
            json=event.to_payload(),
            headers=self._headers(),
            timeout=self.timeout,
            stream=True
        )
        try:
            response.raise_for_status()
            # Byte-sized reads so a trickling body cannot outlast the deadline
            for _ in response.iter_content(chunk_size=1):
                if time.monotonic() > deadline:
                    raise requests.Timeout(
                        f"Response from {self.url} not completed within {self.timeout} seconds"
                    )
        finally:
            response.close()
        return response

    def send(self, event: WebhookEvent) -> None:
        logger.info(f"Sending webhook event id={event.id} type={event.type} to {self.url}")
        deadline = time.monotonic() + self.timeout
        future = self.executor.submit(self._post, event, deadline)
        try:
            response = future.result(timeout=self.timeout)
        except FuturesTimeoutError as exc:
            future.cancel()
            logger.error(f"Webhook event {event.id} not delivered within {self.timeout} seconds")
            raise WebhookDeliveryError() from exc
        except Exception as exc:
            logger.error(f"Webhook event {event.id} failed: {exc}", exc_info=True)
            raise WebhookDeliveryError() from exc

        logger.info(f"Webhook event {event.id} delivered with status {response.status_code}")


_session: Optional[requests.Session] = None
_executor: Optional[ThreadPoolExecutor] = None


def get_http_session() -> requests.Session:
    """Process-wide HTTP session, so connections are pooled across requests."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def get_http_executor() -> ThreadPoolExecutor:
    """Process-wide worker pool for outbound webhook calls."""
    global _executor
    if _executor is None:
        _executor = ThreadPoolExecutor(max_workers=WEBHOOK_WORKERS, thread_name_prefix="webhook")
    return _executor


def close_http_session() -> None:
    global _session, _executor
    if _executor is not None:
        _executor.shutdown(wait=False, cancel_futures=True)
        _executor = None
    if _session is not None:
        _session.close()
        _session = None


def get_webhook_sender() -> WebhookSender:
    """Dependency providing the configured webhook sender."""
    settings = get_settings()
    return RequestsWebhookSender(
        session=get_http_session(),
        url=settings.webhook_event_url,
        timeout=settings.webhook_timeout_seconds,
        auth_token=settings.webhook_auth_token
    )
