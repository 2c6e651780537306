"""Event resource client."""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Dict, Optional

from .core import CoreSender
from .options import RequestOptions
from .types import EventResponse, EventSend
from .validation import require_field, with_idempotency_key


SEND_PATH = "/events/send"


class Events:
    """Client for `/events` endpoints."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    def send(
        self,
        payload: EventSend,
        idempotency_key: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> EventResponse:
        """Trigger an event for a contact.

        ``idempotency_key`` (at most 100 characters) is sent as the
        ``Idempotency-Key`` header so a retried send is not processed twice.
        """
        options = with_idempotency_key(options, idempotency_key)
        return self.sender.post_json(SEND_PATH, self._body(payload), EventResponse, options)

    def send_async(
        self,
        payload: EventSend,
        idempotency_key: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "Future[EventResponse]":
        options = with_idempotency_key(options, idempotency_key)
        return self.sender.post_json_async(SEND_PATH, self._body(payload), EventResponse, options)

    @staticmethod
    def _body(payload: EventSend) -> Dict[str, Any]:
        body: Dict[str, Any] = dict(payload)
        require_field(body, "eventName")
        return body
