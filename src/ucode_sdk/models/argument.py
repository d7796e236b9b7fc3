# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Per-call argument models for object operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

__all__ = ["Request", "Argument", "ArgumentWithPagination"]

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


@dataclass
class Request:
    """Generic JSON payload container.

    Carries filters, guids, object fields or relation descriptors. Serialized
    as ``{"data": {...}}`` for body-carrying object operations.

    :param data: Mapping of field names to arbitrary JSON-serializable values.
    :type data: dict[str, Any]

    Example::

        Request(data={"guid": "a1b2", "name": "Contoso"})
    """

    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, value: Union["Request", Mapping[str, Any], None]) -> "Request":
        """Coerce a mapping (or ``None``) into a :class:`Request`."""
        if isinstance(value, Request):
            return value
        if value is None:
            return cls()
        if not isinstance(value, Mapping):
            raise TypeError("request must be a Request or a mapping")
        return cls(data=dict(value))

    def to_dict(self) -> Dict[str, Any]:
        return {"data": dict(self.data)}


@dataclass
class Argument:
    """Argument for a single object operation.

    :param table_slug: Identifier of the remote collection, e.g. ``"order"``.
    :type table_slug: str
    :param request: Payload for the call. A plain dict is wrapped into a :class:`Request`.
    :type request: Request or dict
    :param disable_faas: When True the platform skips serverless triggers for this call.
    :type disable_faas: bool

    Example::

        arg = Argument("order", {"guid": "a1b2"}, disable_faas=True)
    """

    table_slug: str = ""
    request: Request = field(default_factory=Request)
    disable_faas: bool = False

    def __post_init__(self) -> None:
        self.request = Request.of(self.request)

    @property
    def data(self) -> Dict[str, Any]:
        return self.request.data

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.request.data.get(key, default)


@dataclass
class ArgumentWithPagination(Argument):
    """:class:`Argument` with 1-based pagination.

    :param limit: Maximum number of records per page.
    :type limit: int
    :param page: 1-based page number.
    :type page: int
    """

    limit: int = DEFAULT_LIMIT
    page: int = DEFAULT_PAGE

    @property
    def offset(self) -> int:
        return max(self.page - 1, 0) * self.limit
