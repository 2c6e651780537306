"""Per-call options."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping


@dataclass(frozen=True)
class RequestOptions:
    """Extra headers sent with a single call.

    ``Authorization`` and ``Content-Type`` are always set by the client and
    override anything given here.
    """

    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", dict(self.headers or {}))

    def with_header(self, name: str, value: str) -> "RequestOptions":
        headers: Dict[str, str] = dict(self.headers)
        headers[name] = value
        return RequestOptions(headers)
