"""Client-side checks run before a request is built."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import LoopsValidationError
from .options import RequestOptions


MAX_IDEMPOTENCY_KEY_LENGTH = 100

IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"


def require_field(payload: Mapping[str, Any], name: str) -> None:
    value = payload.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise LoopsValidationError(f"{name} is required and cannot be blank")


def with_idempotency_key(
    options: Optional[RequestOptions], idempotency_key: Optional[str]
) -> Optional[RequestOptions]:
    """Validate ``idempotency_key`` and add it to ``options`` as a header."""
    if idempotency_key is None:
        return options
    if len(idempotency_key) > MAX_IDEMPOTENCY_KEY_LENGTH:
        raise LoopsValidationError(
            f"Idempotency key must not exceed {MAX_IDEMPOTENCY_KEY_LENGTH} characters, "
            f"got: {len(idempotency_key)}"
        )
    return (options or RequestOptions()).with_header(IDEMPOTENCY_KEY_HEADER, idempotency_key)
