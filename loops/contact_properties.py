"""Contact property resource client."""
from __future__ import annotations

import re
from concurrent.futures import Future
from typing import Any, Dict, List, Optional

from .core import CoreSender
from .errors import LoopsValidationError
from .options import RequestOptions
from .types import (
    ContactProperty,
    ContactPropertyCreate,
    ContactPropertyListType,
    ContactPropertyResponse,
)
from .validation import require_field


PROPERTIES_PATH = "/contacts/properties"

PROPERTY_TYPES = ("string", "number", "boolean", "date")

_CAMEL_CASE = re.compile(r"[a-z][a-zA-Z0-9]*")


def _create_body(payload: ContactPropertyCreate) -> Dict[str, Any]:
    body: Dict[str, Any] = dict(payload)
    require_field(body, "name")
    require_field(body, "type")
    if not isinstance(body["name"], str) or not _CAMEL_CASE.fullmatch(body["name"]):
        raise LoopsValidationError(
            f"name must be in camelCase format (e.g., 'planName'), got: {body['name']}"
        )
    if body["type"] not in PROPERTY_TYPES:
        raise LoopsValidationError(
            f"type must be one of: {', '.join(PROPERTY_TYPES)}. Got: {body['type']}"
        )
    return body


def _list_query(list_type: Optional[ContactPropertyListType]) -> Dict[str, str]:
    return {"list": list_type} if list_type is not None else {}


class ContactProperties:
    """Client for `/contacts/properties` endpoints."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    def create(
        self, payload: ContactPropertyCreate, *, options: Optional[RequestOptions] = None
    ) -> ContactPropertyResponse:
        return self.sender.post_json(
            PROPERTIES_PATH, _create_body(payload), ContactPropertyResponse, options
        )

    def create_async(
        self, payload: ContactPropertyCreate, *, options: Optional[RequestOptions] = None
    ) -> "Future[ContactPropertyResponse]":
        return self.sender.post_json_async(
            PROPERTIES_PATH, _create_body(payload), ContactPropertyResponse, options
        )

    def list(
        self,
        list_type: Optional[ContactPropertyListType] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> List[ContactProperty]:
        """List properties; ``list_type="custom"`` limits it to team-defined ones."""
        return self.sender.get_list(PROPERTIES_PATH, _list_query(list_type), ContactProperty, options)

    def list_async(
        self,
        list_type: Optional[ContactPropertyListType] = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "Future[List[ContactProperty]]":
        return self.sender.get_list_async(
            PROPERTIES_PATH, _list_query(list_type), ContactProperty, options
        )
