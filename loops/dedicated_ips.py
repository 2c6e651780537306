"""Dedicated sending IP resource client."""
from __future__ import annotations

from concurrent.futures import Future
from typing import List, Optional

from .core import CoreSender
from .options import RequestOptions


IPS_PATH = "/dedicated-sending-ips"


class DedicatedIps:
    """Client for `/dedicated-sending-ips`. Returns plain IP address strings."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    def list(self, *, options: Optional[RequestOptions] = None) -> List[str]:
        return self.sender.get_list(IPS_PATH, None, str, options)

    def list_async(self, *, options: Optional[RequestOptions] = None) -> "Future[List[str]]":
        return self.sender.get_list_async(IPS_PATH, None, str, options)
