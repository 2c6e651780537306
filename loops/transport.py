"""HTTP transport layer.

The core sender only needs ``execute(request) -> response``. The default
implementation goes through a ``requests.Session``; ``NoopTransport`` answers
every request with a fixed response and is handy offline.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Union

import requests
from requests.structures import CaseInsensitiveDict
from typing_extensions import Literal


logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

Timeout = Union[float, tuple]


@dataclass(frozen=True)
class TransportRequest:
    method: HttpMethod
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", dict(self.headers or {}))
        object.__setattr__(self, "body", bytes(self.body or b""))


@dataclass(frozen=True)
class TransportResponse:
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", CaseInsensitiveDict(self.headers or {}))
        object.__setattr__(self, "body", bytes(self.body or b""))

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(ABC):
    """Executes a single HTTP request."""

    @abstractmethod
    def execute(self, request: TransportRequest) -> TransportResponse:
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the transport."""


class RequestsTransport(Transport):
    """Transport backed by a ``requests.Session``.

    Parameters
    ----------
    session:
        Session to reuse; a new one is created (and owned) when omitted.
    timeout:
        Passed straight to ``requests``; ``None`` waits indefinitely.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[Timeout] = None,
    ) -> None:
        self._owns_session = session is None
        self._session = session or requests.Session()
        self.timeout = timeout

    def execute(self, request: TransportRequest) -> TransportResponse:
        resp = self._session.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            data=request.body or None,
            timeout=self.timeout,
        )
        return TransportResponse(resp.status_code, resp.headers, resp.content)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()


class NoopTransport(Transport):
    """Returns the same canned response for every request.

    Requests are recorded in ``requests`` so callers can inspect what would
    have been sent.
    """

    def __init__(
        self,
        status: int = 200,
        body: Optional[Union[str, bytes]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.response = TransportResponse(status, headers or {}, body or b"")
        self.requests: List[TransportRequest] = []

    def execute(self, request: TransportRequest) -> TransportResponse:
        logger.debug("NoopTransport.execute: %s %s -> %s", request.method, request.url, self.response.status)
        self.requests.append(request)
        return self.response
