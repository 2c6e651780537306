"""Python client for the Loops API."""

import logging

from .loops import Loops
from .core import CoreSender
from .errors import LoopsAPIError, LoopsError, LoopsValidationError, RateLimitExceededError
from .options import RequestOptions
from .transport import NoopTransport, RequestsTransport, Transport, TransportRequest, TransportResponse
from . import types

logging.getLogger("loops").addHandler(logging.NullHandler())

__all__ = [
    "Loops",
    "CoreSender",
    "LoopsError",
    "LoopsAPIError",
    "LoopsValidationError",
    "RateLimitExceededError",
    "RequestOptions",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "RequestsTransport",
    "NoopTransport",
    "types",
]
