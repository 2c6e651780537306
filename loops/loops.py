"""Core client for interacting with the Loops API.

Every resource client shares one :class:`~loops.core.CoreSender`, which owns
the transport and the thread pool used by the ``*_async`` methods.
"""
from __future__ import annotations

import os
from concurrent.futures import Executor
from typing import Any, Optional

import requests

from .api_key import ApiKey
from .contact_properties import ContactProperties
from .contacts import Contacts
from .core import CoreSender
from .dedicated_ips import DedicatedIps
from .errors import LoopsValidationError
from .events import Events
from .mailing_lists import MailingLists
from .transactional import Transactional
from .transport import RequestsTransport, Timeout, Transport


DEFAULT_BASE_URL = "https://app.loops.so/api/v1"


class Loops:
    """Loops API client.

    Parameters
    ----------
    key:
        API key issued by Loops. If not provided, the client reads
        ``LOOPS_API_KEY`` from the environment.
    url:
        Optional base URL for the API (useful for testing). Falls back to
        ``LOOPS_BASE_URL``, then to the public endpoint.
    session:
        ``requests.Session`` to reuse for connection pooling. Ignored when
        ``transport`` is given.
    transport:
        Custom transport, e.g. :class:`~loops.transport.NoopTransport`.
    executor:
        Executor for the ``*_async`` methods; a private thread pool is used
        when omitted.
    timeout:
        Request timeout passed to ``requests``.
    """

    def __init__(
        self,
        key: Optional[str] = None,
        url: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        transport: Optional[Transport] = None,
        executor: Optional[Executor] = None,
        timeout: Optional[Timeout] = None,
    ) -> None:
        self.key = key or os.getenv("LOOPS_API_KEY")
        if not self.key or not self.key.strip():
            raise LoopsValidationError("Missing API key. Pass it to Loops('your-api-key')")

        base = url or os.getenv("LOOPS_BASE_URL") or DEFAULT_BASE_URL
        self.url = base.rstrip("/")

        self._transport = transport or RequestsTransport(session, timeout=timeout)
        self.sender = CoreSender(self._transport, self.url, self.key, executor=executor)

        self.contacts = Contacts(self.sender)
        self.events = Events(self.sender)
        self.transactional = Transactional(self.sender)
        self.mailing_lists = MailingLists(self.sender)
        self.contact_properties = ContactProperties(self.sender)
        self.dedicated_ips = DedicatedIps(self.sender)
        self.api_key = ApiKey(self.sender)

    def close(self) -> None:
        """Wait for pending async calls, then release the HTTP session."""
        self.sender.close()
        self._transport.close()

    def __enter__(self) -> "Loops":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Loops(url={self.url!r})"
