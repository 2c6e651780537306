"""API key test endpoint."""
from __future__ import annotations

from concurrent.futures import Future
from typing import Optional

from .core import CoreSender
from .options import RequestOptions
from .types import ApiKeyTestResponse


API_KEY_PATH = "/api-key"


class ApiKey:
    """Client for `/api-key`."""

    def __init__(self, sender: CoreSender) -> None:
        self.sender = sender

    def test(self, *, options: Optional[RequestOptions] = None) -> ApiKeyTestResponse:
        """Check the configured key. An invalid key raises ``LoopsAPIError`` (401)."""
        return self.sender.get(API_KEY_PATH, None, ApiKeyTestResponse, options)

    def test_async(self, *, options: Optional[RequestOptions] = None) -> "Future[ApiKeyTestResponse]":
        return self.sender.get_async(API_KEY_PATH, None, ApiKeyTestResponse, options)
