"""Request pipeline shared by every resource client.

Each call is built into a :class:`~loops.transport.TransportRequest`, executed,
classified by status code and decoded into the caller's requested shape.
Async variants run the same pipeline on an executor and return a
``concurrent.futures.Future``.
"""
from __future__ import annotations

import json
import logging
import re
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar
from urllib.parse import quote, urlencode

from typing_extensions import is_typeddict

from .errors import LoopsAPIError, LoopsValidationError, RateLimitExceededError
from .options import RequestOptions
from .transport import HttpMethod, Transport, TransportRequest, TransportResponse


logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryParams = Mapping[str, str]

_INTEGER = re.compile(r"[+-]?\d+")

_LONG_MIN, _LONG_MAX = -(2 ** 63), 2 ** 63 - 1

_SCALARS = (str, int, float, bool)


def parse_retry_after(value: Optional[str]) -> int:
    """Integer value of a ``Retry-After`` header, 0 when missing or unparsable."""
    if value is None or not _INTEGER.fullmatch(value):
        return 0
    seconds = int(value)
    if not _LONG_MIN <= seconds <= _LONG_MAX:
        return 0
    return seconds


def check_response(response: TransportResponse) -> None:
    """Raise the matching error for a status >= 400, otherwise do nothing."""
    if response.status < 400:
        return
    raw_body = response.text
    if response.status == 429:
        raise RateLimitExceededError.from_response(
            response.status,
            raw_body,
            retry_after_seconds=parse_retry_after(response.headers.get("Retry-After")),
        )
    raise LoopsAPIError.from_response(response.status, raw_body)


def _matches(value: Any, shape: Any) -> bool:
    if shape is Any:
        return True
    if shape is dict or is_typeddict(shape):
        return isinstance(value, dict)
    if shape is list:
        return isinstance(value, list)
    if shape is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if shape is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if shape in _SCALARS:
        return isinstance(value, shape)
    raise TypeError(f"unsupported response shape: {shape!r}")


def _check_shape(shape: Any, allow_none: bool = False) -> None:
    """Reject shapes the decoder cannot check, before any I/O."""
    if shape is None and allow_none:
        return
    if shape is Any or shape is dict or shape is list or shape in _SCALARS or is_typeddict(shape):
        return
    raise TypeError(f"unsupported response shape: {shape!r}")


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", repr(shape))


class CoreSender:
    """Builds, sends and decodes API calls.

    Parameters
    ----------
    transport:
        Executes the HTTP requests.
    base_url:
        Prefix for every path, e.g. ``https://app.loops.so/api/v1``.
    api_key:
        Sent as ``Authorization: Bearer <api_key>``.
    codec:
        Object exposing ``dumps``/``loads``; the ``json`` module by default.
    executor:
        Runs the ``*_async`` calls. When omitted the sender creates a thread
        pool and shuts it down in :meth:`close`.
    """

    def __init__(
        self,
        transport: Transport,
        base_url: str,
        api_key: str,
        *,
        codec: Any = json,
        executor: Optional[Executor] = None,
    ) -> None:
        self.transport = transport
        self.base_url = base_url
        self.api_key = api_key
        self.codec = codec
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(thread_name_prefix="loops")

    def close(self) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=True)

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------
    def build_request(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[Any] = None,
        query: Optional[QueryParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> TransportRequest:
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{urlencode(list(query.items()), quote_via=quote)}"

        headers: Dict[str, str] = dict(options.headers) if options else {}
        headers["Authorization"] = f"Bearer {self.api_key}"

        data = b""
        if body is not None:
            headers["Content-Type"] = "application/json"
            try:
                data = self.codec.dumps(body).encode("utf-8")
            except Exception as exc:
                raise LoopsValidationError(f"Failed to serialize request body: {exc}") from exc

        return TransportRequest(method, url, headers, data)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def _execute(self, request: TransportRequest) -> TransportResponse:
        if logger.isEnabledFor(logging.DEBUG):
            size = f"({len(request.body)}-byte body)" if request.body else ""
            logger.debug("--> %s %s %s", request.method, request.url, size)
        else:
            logger.info("--> %s %s", request.method, request.url)

        try:
            response = self.transport.execute(request)
        except Exception as exc:
            raise LoopsAPIError(f"Request failed: {exc}") from exc

        ok = 200 <= response.status < 300
        status = f"{response.status}" if ok else f"{response.status} ERROR"
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("<-- %s (%d-byte body)", status, len(response.body))
        elif response.status >= 400:
            logger.warning("<-- %s", status)
        else:
            logger.info("<-- %s", status)

        check_response(response)
        return response

    def _decode(self, response: TransportResponse) -> Any:
        try:
            return self.codec.loads(response.body)
        except Exception as exc:
            raise LoopsAPIError(f"Request failed: invalid JSON response: {exc}") from exc

    def _object(self, request: TransportRequest, response_type: Any) -> Any:
        response = self._execute(request)
        if response_type is None:
            return None
        value = self._decode(response)
        if not _matches(value, response_type):
            raise LoopsAPIError(
                f"Request failed: expected {_shape_name(response_type)}, "
                f"got {type(value).__name__}"
            )
        return value

    def _list(self, request: TransportRequest, element_type: Any) -> List[Any]:
        value = self._decode(self._execute(request))
        if not isinstance(value, list):
            raise LoopsAPIError(f"Request failed: expected a JSON array, got {type(value).__name__}")
        for index, item in enumerate(value):
            if not _matches(item, element_type):
                raise LoopsAPIError(
                    f"Request failed: expected {_shape_name(element_type)} at index {index}, "
                    f"got {type(item).__name__}"
                )
        return value

    def _submit(self, fn: Callable[..., T], *args: Any) -> "Future[T]":
        return self.executor.submit(fn, *args)

    # ------------------------------------------------------------------
    # Generic entry points
    # ------------------------------------------------------------------
    def send_for_object(
        self,
        method: HttpMethod,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[QueryParams] = None,
        response_type: Any = dict,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Send a call and decode the response body as a single value.

        ``response_type=None`` skips decoding and returns ``None``.
        """
        _check_shape(response_type, allow_none=True)
        request = self.build_request(method, path, body, query, options)
        return self._object(request, response_type)

    def send_for_list(
        self,
        method: HttpMethod,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[QueryParams] = None,
        element_type: Any = dict,
        options: Optional[RequestOptions] = None,
    ) -> List[Any]:
        """Send a call and decode a JSON array response."""
        _check_shape(element_type)
        request = self.build_request(method, path, body, query, options)
        return self._list(request, element_type)

    def send_for_object_async(
        self,
        method: HttpMethod,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[QueryParams] = None,
        response_type: Any = dict,
        options: Optional[RequestOptions] = None,
    ) -> "Future[Any]":
        _check_shape(response_type, allow_none=True)
        request = self.build_request(method, path, body, query, options)
        return self._submit(self._object, request, response_type)

    def send_for_list_async(
        self,
        method: HttpMethod,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[QueryParams] = None,
        element_type: Any = dict,
        options: Optional[RequestOptions] = None,
    ) -> "Future[List[Any]]":
        _check_shape(element_type)
        request = self.build_request(method, path, body, query, options)
        return self._submit(self._list, request, element_type)

    # ------------------------------------------------------------------
    # HTTP verb helpers
    # ------------------------------------------------------------------
    def get(self, path: str, query: Optional[QueryParams] = None, response_type: Any = dict,
            options: Optional[RequestOptions] = None) -> Any:
        return self.send_for_object("GET", path, query=query, response_type=response_type, options=options)

    def get_async(self, path: str, query: Optional[QueryParams] = None, response_type: Any = dict,
                  options: Optional[RequestOptions] = None) -> "Future[Any]":
        return self.send_for_object_async("GET", path, query=query, response_type=response_type, options=options)

    def get_list(self, path: str, query: Optional[QueryParams] = None, element_type: Any = dict,
                 options: Optional[RequestOptions] = None) -> List[Any]:
        return self.send_for_list("GET", path, query=query, element_type=element_type, options=options)

    def get_list_async(self, path: str, query: Optional[QueryParams] = None, element_type: Any = dict,
                       options: Optional[RequestOptions] = None) -> "Future[List[Any]]":
        return self.send_for_list_async("GET", path, query=query, element_type=element_type, options=options)

    def post_json(self, path: str, body: Any, response_type: Any = dict,
                  options: Optional[RequestOptions] = None) -> Any:
        return self.send_for_object("POST", path, body=body, response_type=response_type, options=options)

    def post_json_async(self, path: str, body: Any, response_type: Any = dict,
                        options: Optional[RequestOptions] = None) -> "Future[Any]":
        return self.send_for_object_async("POST", path, body=body, response_type=response_type, options=options)

    def put_json(self, path: str, body: Any, response_type: Any = dict,
                 options: Optional[RequestOptions] = None) -> Any:
        return self.send_for_object("PUT", path, body=body, response_type=response_type, options=options)

    def put_json_async(self, path: str, body: Any, response_type: Any = dict,
                       options: Optional[RequestOptions] = None) -> "Future[Any]":
        return self.send_for_object_async("PUT", path, body=body, response_type=response_type, options=options)

    def delete_json(self, path: str, body: Any, response_type: Any = dict,
                    options: Optional[RequestOptions] = None) -> Any:
        return self.send_for_object("DELETE", path, body=body, response_type=response_type, options=options)

    def delete_json_async(self, path: str, body: Any, response_type: Any = dict,
                          options: Optional[RequestOptions] = None) -> "Future[Any]":
        return self.send_for_object_async("DELETE", path, body=body, response_type=response_type, options=options)
