# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result types for UCode SDK operations.

Every operation returns an :class:`OperationResult` that behaves like the
decoded result by default and keeps the raw HTTP response and request
metadata at hand for diagnostics:

- :class:`RequestMetadata`: HTTP request/response metadata for tracing
- :class:`UcodeResponse`: result plus a telemetry dictionary
- :class:`OperationResult`: wrapper enabling the ``.with_response_details()`` pattern

Example::

    # Default behavior - acts like the decoded result
    page = client.items.get_list(arg)
    print(page["data"]["count"])

    # Raw response and telemetry
    print(page.response.status_code)
    details = page.with_response_details()
    print(details.telemetry["timing_ms"])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, Optional, TypeVar

import requests

T = TypeVar("T")


@dataclass(frozen=True)
class RequestMetadata:
    """
    HTTP request/response metadata for diagnostics and tracing.

    :param client_request_id: Client-generated request ID sent in the ``X-Request-Id`` header.
    :type client_request_id: :class:`str` | None
    :param correlation_id: Client-generated correlation ID sent in the ``X-Correlation-Id``
        header, shared across all HTTP requests within a single SDK call scope.
    :type correlation_id: :class:`str` | None
    :param method: HTTP method of the request.
    :type method: :class:`str` | None
    :param url: Target URL of the request.
    :type url: :class:`str` | None
    :param http_status_code: HTTP response status code.
    :type http_status_code: :class:`int` | None
    :param timing_ms: Round trip duration in milliseconds.
    :type timing_ms: :class:`float` | None
    """

    client_request_id: Optional[str] = None
    correlation_id: Optional[str] = None
    method: Optional[str] = None
    url: Optional[str] = None
    http_status_code: Optional[int] = None
    timing_ms: Optional[float] = None


@dataclass
class UcodeResponse(Generic[T]):
    """
    Detailed response object combining the operation result with telemetry.

    :param result: The decoded operation result.
    :type result: T
    :param telemetry: Request metadata as a dictionary (``client_request_id``,
        ``correlation_id``, ``method``, ``url``, ``http_status_code``, ``timing_ms``).
    :type telemetry: :class:`dict`
    :param response: The underlying HTTP response.
    :type response: :class:`requests.Response` | None
    """

    result: T
    telemetry: Dict[str, Any] = field(default_factory=dict)
    response: Optional[requests.Response] = None


class OperationResult(Generic[T]):
    """
    Wrapper around an operation outcome.

    Acts like the decoded result (iteration, indexing, ``in``, equality,
    truthiness) while exposing the raw HTTP response via :attr:`response`
    and full details via :meth:`with_response_details`.

    :param result: The decoded result value.
    :type result: T
    :param metadata: HTTP request/response metadata.
    :type metadata: :class:`RequestMetadata` | None
    :param response: The underlying HTTP response.
    :type response: :class:`requests.Response` | None
    """

    __slots__ = ("_result", "_metadata", "_response")

    def __init__(
        self,
        result: T,
        metadata: Optional[RequestMetadata] = None,
        response: Optional[requests.Response] = None,
    ) -> None:
        self._result = result
        self._metadata = metadata or RequestMetadata()
        self._response = response

    @property
    def value(self) -> T:
        """The decoded result."""
        return self._result

    @property
    def response(self) -> Optional[requests.Response]:
        """The raw HTTP response the result was decoded from."""
        return self._response

    @property
    def metadata(self) -> RequestMetadata:
        return self._metadata

    def with_response_details(self) -> UcodeResponse[T]:
        """
        Return the result together with telemetry and the raw response.

        :rtype: :class:`UcodeResponse`
        """
        telemetry: Dict[str, Any] = {
            "client_request_id": self._metadata.client_request_id,
            "correlation_id": self._metadata.correlation_id,
            "method": self._metadata.method,
            "url": self._metadata.url,
            "http_status_code": self._metadata.http_status_code,
            "timing_ms": self._metadata.timing_ms,
        }
        return UcodeResponse(result=self._result, telemetry=telemetry, response=self._response)

    def __iter__(self) -> Iterator:
        if isinstance(self._result, (list, tuple)):
            return iter(self._result)
        if isinstance(self._result, dict):
            return iter(self._result)
        if self._result is None:
            return iter([])
        return iter([self._result])

    def __getitem__(self, key: Any) -> Any:
        return self._result[key]  # type: ignore

    def get(self, key: Any, default: Any = None) -> Any:
        """Dict-style lookup on mapping results; returns ``default`` otherwise."""
        if isinstance(self._result, dict):
            return self._result.get(key, default)
        return default

    def __len__(self) -> int:
        if isinstance(self._result, (list, tuple, dict)):
            return len(self._result)
        return 0 if self._result is None else 1

    def __contains__(self, item: Any) -> bool:
        if isinstance(self._result, (list, tuple, dict, str)):
            return item in self._result
        return item == self._result

    def __bool__(self) -> bool:
        return bool(self._result)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OperationResult):
            return self._result == other._result
        return self._result == other

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._result)

    def __repr__(self) -> str:
        return f"OperationResult({self._result!r})"


__all__ = ["RequestMetadata", "UcodeResponse", "OperationResult"]
