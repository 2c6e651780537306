"""Contact resource client using TypedDict shapes (no Pydantic)."""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Dict, List, Optional

from .core import CoreSender
from .options import RequestOptions
from .types import (
    Contact,
    ContactCreate,
    ContactDeleteResponse,
    ContactSuccessResponse,
    ContactUpdate,
)
from .validation import require_field


CREATE_PATH = "/contacts/create"
UPDATE_PATH = "/contacts/update"
FIND_PATH = "/contacts/find"
DELETE_PATH = "/contacts/delete"


def _identity(email: Optional[str], user_id: Optional[str]) -> Dict[str, str]:
    params: Dict[str, str] = {}
    if email is not None:
        params["email"] = email
    if user_id is not None:
        params["userId"] = user_id
    return params


class Contacts:
    """Client for `/contacts` endpoints."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    def _create_body(self, payload: ContactCreate) -> Dict[str, Any]:
        body: Dict[str, Any] = dict(payload)
        require_field(body, "email")
        body.setdefault("subscribed", True)
        return body

    # Create -----------------------------------------------------------
    def create(
        self, payload: ContactCreate, *, options: Optional[RequestOptions] = None
    ) -> ContactSuccessResponse:
        return self.sender.post_json(
            CREATE_PATH, self._create_body(payload), ContactSuccessResponse, options
        )

    def create_async(
        self, payload: ContactCreate, *, options: Optional[RequestOptions] = None
    ) -> "Future[ContactSuccessResponse]":
        return self.sender.post_json_async(
            CREATE_PATH, self._create_body(payload), ContactSuccessResponse, options
        )

    # Update -----------------------------------------------------------
    def update(
        self, payload: ContactUpdate, *, options: Optional[RequestOptions] = None
    ) -> ContactSuccessResponse:
        return self.sender.put_json(UPDATE_PATH, dict(payload), ContactSuccessResponse, options)

    def update_async(
        self, payload: ContactUpdate, *, options: Optional[RequestOptions] = None
    ) -> "Future[ContactSuccessResponse]":
        return self.sender.put_json_async(UPDATE_PATH, dict(payload), ContactSuccessResponse, options)

    # Find -------------------------------------------------------------
    def find(
        self,
        *,
        email: Optional[str] = None,
        user_id: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> List[Contact]:
        """Look a contact up by email or user ID. An unknown contact gives ``[]``."""
        return self.sender.get_list(FIND_PATH, _identity(email, user_id), Contact, options)

    def find_async(
        self,
        *,
        email: Optional[str] = None,
        user_id: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> "Future[List[Contact]]":
        return self.sender.get_list_async(FIND_PATH, _identity(email, user_id), Contact, options)

    # Delete -----------------------------------------------------------
    def delete(
        self,
        *,
        email: Optional[str] = None,
        user_id: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> ContactDeleteResponse:
        return self.sender.delete_json(
            DELETE_PATH, _identity(email, user_id), ContactDeleteResponse, options
        )

    def delete_async(
        self,
        *,
        email: Optional[str] = None,
        user_id: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> "Future[ContactDeleteResponse]":
        return self.sender.delete_json_async(
            DELETE_PATH, _identity(email, user_id), ContactDeleteResponse, options
        )
