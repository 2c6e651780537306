"""Transactional email resource client."""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Dict, Optional

from .core import CoreSender
from .errors import LoopsValidationError
from .options import RequestOptions
from .types import TransactionalListResponse, TransactionalResponse, TransactionalSend
from .validation import require_field, with_idempotency_key


TRANSACTIONAL_PATH = "/transactional"

MIN_PER_PAGE = 10
MAX_PER_PAGE = 50


def _list_query(per_page: Optional[int], cursor: Optional[str]) -> Dict[str, str]:
    if per_page is not None and not MIN_PER_PAGE <= per_page <= MAX_PER_PAGE:
        raise LoopsValidationError(
            f"perPage must be between {MIN_PER_PAGE} and {MAX_PER_PAGE}, got: {per_page}"
        )
    query: Dict[str, str] = {}
    if per_page is not None:
        query["perPage"] = str(per_page)
    if cursor is not None:
        query["cursor"] = cursor
    return query


class Transactional:
    """Client for `/transactional` endpoints."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    # Send -------------------------------------------------------------
    def send(
        self,
        payload: TransactionalSend,
        idempotency_key: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> TransactionalResponse:
        options = with_idempotency_key(options, idempotency_key)
        return self.sender.post_json(
            TRANSACTIONAL_PATH, self._body(payload), TransactionalResponse, options
        )

    def send_async(
        self,
        payload: TransactionalSend,
        idempotency_key: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "Future[TransactionalResponse]":
        options = with_idempotency_key(options, idempotency_key)
        return self.sender.post_json_async(
            TRANSACTIONAL_PATH, self._body(payload), TransactionalResponse, options
        )

    # List -------------------------------------------------------------
    def list(
        self,
        per_page: Optional[int] = None,
        cursor: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> TransactionalListResponse:
        """List published transactional emails, one page at a time.

        Pass ``pagination["nextCursor"]`` from the previous page as ``cursor``.
        """
        return self.sender.get(
            TRANSACTIONAL_PATH, _list_query(per_page, cursor), TransactionalListResponse, options
        )

    def list_async(
        self,
        per_page: Optional[int] = None,
        cursor: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "Future[TransactionalListResponse]":
        return self.sender.get_async(
            TRANSACTIONAL_PATH, _list_query(per_page, cursor), TransactionalListResponse, options
        )

    @staticmethod
    def _body(payload: TransactionalSend) -> Dict[str, Any]:
        body: Dict[str, Any] = dict(payload)
        require_field(body, "transactionalId")
        require_field(body, "email")
        return body
