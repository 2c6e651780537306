"""Exceptions raised by the Loops client.

``LoopsAPIError`` covers every failed call that reached (or tried to reach)
the API. ``RateLimitExceededError`` is the 429 specialisation carrying the
server's ``Retry-After`` hint. ``LoopsValidationError`` is raised locally,
before any request leaves the process.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional


class LoopsError(Exception):
    """Base class for all errors raised by this package."""


class LoopsAPIError(LoopsError):
    """A call failed at the API, the network, or while decoding the response.

    Attributes:
        status_code: HTTP status of the response, ``None`` when no response
            was received or the response could not be decoded.
        raw_body: The response body as text, ``None`` when there was none.
        error: The ``error`` field of a JSON error body, if present.
        message: Human-readable description, always set.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        raw_body: Optional[str] = None,
        error: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.raw_body = raw_body
        self.error = error
        super().__init__(message)

    @classmethod
    def from_response(cls, status_code: int, raw_body: str, **kwargs: Any) -> "LoopsAPIError":
        return cls(
            extract_message(status_code, raw_body),
            status_code=status_code,
            raw_body=raw_body,
            error=extract_error(raw_body),
            **kwargs,
        )


class RateLimitExceededError(LoopsAPIError):
    """HTTP 429. ``retry_after_seconds`` is 0 when the server gave no usable hint."""

    def __init__(self, message: str, *, retry_after_seconds: int = 0, **kwargs: Any) -> None:
        self.retry_after_seconds = retry_after_seconds
        super().__init__(message, **kwargs)


class LoopsValidationError(LoopsError, ValueError):
    """Raised before any I/O when a request cannot be built."""


# ---------------------------------------------------------------------------
# Error body parsing
# ---------------------------------------------------------------------------

def _parse_error_body(raw_body: Optional[str]) -> Dict[str, Any]:
    if not raw_body:
        return {}
    try:
        payload = json.loads(raw_body)
    except (ValueError, RecursionError):
        return {}
    return payload if isinstance(payload, dict) else {}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else json.dumps(value)


def extract_error(raw_body: Optional[str]) -> Optional[str]:
    """Return the ``error`` field of a JSON error body, or ``None``."""
    return _as_text(_parse_error_body(raw_body).get("error"))


def extract_message(status_code: int, raw_body: Optional[str]) -> str:
    """Build ``"HTTP <status>"``, suffixed with the body's message or error."""
    payload = _parse_error_body(raw_body)
    detail = _as_text(payload.get("message"))
    if detail is None:
        detail = _as_text(payload.get("error"))
    if detail is None:
        return f"HTTP {status_code}"
    return f"HTTP {status_code}: {detail}"
