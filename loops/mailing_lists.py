"""Mailing list resource client."""
from __future__ import annotations

from concurrent.futures import Future
from typing import List, Optional

from .core import CoreSender
from .options import RequestOptions
from .types import MailingList


LISTS_PATH = "/lists"


class MailingLists:
    """Client for `/lists` endpoints."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    def list(self, *, options: Optional[RequestOptions] = None) -> List[MailingList]:
        return self.sender.get_list(LISTS_PATH, None, MailingList, options)

    def list_async(self, *, options: Optional[RequestOptions] = None) -> "Future[List[MailingList]]":
        return self.sender.get_list_async(LISTS_PATH, None, MailingList, options)
