# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level object client for the UCode platform API.

Builds endpoint URLs from table slugs, attaches authentication and tracing
headers, executes single HTTP round trips and decodes the JSON envelope.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, List, Mapping, Optional
from urllib.parse import quote

import requests

from ..common import constants as c
from ..core._error_codes import (
    DESERIALIZATION_INVALID_JSON,
    VALIDATION_GUID_MISSING,
    VALIDATION_IDS_INVALID,
    VALIDATION_PAGINATION_INVALID,
    VALIDATION_REQUEST_NOT_MAPPING,
    VALIDATION_TABLE_SLUG_MISSING,
    _http_subcode,
    _is_transient_status,
)
from ..core._http import _HttpClient
from ..core.config import UcodeConfig
from ..core.errors import DeserializationError, HttpError, ValidationError
from ..core.results import OperationResult, RequestMetadata
from ._auth import _AuthOperationsMixin
from ._files import _FileOperationsMixin
from ._functions import _FunctionOperationsMixin
from ._relationships import _RelationshipOperationsMixin

logger = logging.getLogger(__name__)

_CORRELATION_ID: ContextVar[Optional[str]] = ContextVar("ucode_correlation_id", default=None)

_BODY_EXCERPT_LIMIT = 200


class _ObjectClient(
    _RelationshipOperationsMixin,
    _AuthOperationsMixin,
    _FileOperationsMixin,
    _FunctionOperationsMixin,
):
    """UCode API client: object CRUD, relations, auth, files and functions."""

    def __init__(
        self,
        config: UcodeConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.base_url = (config.base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self.auth_url = (config.base_auth_url or "").rstrip("/")
        self._http = _HttpClient(timeout=config.request_timeout, session=session)

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self._http.close()

    # ----------------------------- scoping -------------------------------
    @contextmanager
    def _call_scope(self) -> Iterator[str]:
        """Share one correlation id across every request issued inside the block."""
        existing = _CORRELATION_ID.get()
        if existing is not None:
            yield existing
            return
        token = _CORRELATION_ID.set(str(uuid.uuid4()))
        try:
            yield _CORRELATION_ID.get()  # type: ignore[misc]
        finally:
            _CORRELATION_ID.reset(token)

    # ----------------------------- plumbing ------------------------------
    def _headers(self, *, json_body: bool = True) -> Dict[str, str]:
        """Build the standard API-key headers."""
        headers = {
            c.HEADER_AUTHORIZATION: c.AUTHORIZATION_API_KEY,
            c.HEADER_API_KEY: self.config.app_id,
            "Accept": "application/json",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _url(self, template: str, **parts: str) -> str:
        quoted = {k: quote(str(v), safe="") for k, v in parts.items()}
        return self.base_url + template.format(**quoted)

    @staticmethod
    def _faas_params(disable_faas: bool) -> Dict[str, str]:
        return {c.PARAM_FROM_OFS: "true" if disable_faas else "false"}

    def _stamp_headers(self, headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        """Copy ``headers`` (or the defaults) and add request and correlation ids."""
        out = dict(headers if headers is not None else self._headers())
        out.setdefault(c.HEADER_REQUEST_ID, str(uuid.uuid4()))
        correlation_id = _CORRELATION_ID.get()
        if correlation_id is not None:
            out.setdefault(c.HEADER_CORRELATION_ID, correlation_id)
        return out

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Execute one HTTP request and raise :class:`HttpError` on non-2xx statuses.

        ``headers`` must already carry the request id (see :meth:`_stamp_headers`).
        """
        headers = kwargs["headers"]

        logger.debug("%s %s (request id %s)", method.upper(), url, headers[c.HEADER_REQUEST_ID])
        r = self._http._request(method, url, **kwargs)
        status = r.status_code
        if 200 <= status < 300:
            return r
        raise self._http_error(r, headers)

    @staticmethod
    def _http_error(r: requests.Response, sent_headers: Mapping[str, str]) -> HttpError:
        status = r.status_code
        text = getattr(r, "text", "") or ""
        service_message: Optional[str] = None
        service_status: Optional[str] = None
        try:
            body = r.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            raw_status = body.get(c.ENVELOPE_STATUS)
            service_status = raw_status if isinstance(raw_status, str) else None
            for key in (c.ENVELOPE_DESCRIPTION, c.ENVELOPE_ERROR, "message", c.ENVELOPE_DATA):
                candidate = body.get(key)
                if isinstance(candidate, str) and candidate:
                    service_message = candidate
                    break

        retry_after: Optional[int] = None
        headers = getattr(r, "headers", None) or {}
        raw_retry = headers.get("Retry-After")
        if raw_retry is not None:
            try:
                retry_after = int(raw_retry)
            except (TypeError, ValueError):
                retry_after = None

        message = f"HTTP {status}"
        if service_message:
            message = f"{message}: {service_message}"
        logger.warning("Request failed with %s (request id %s)", message, sent_headers.get(c.HEADER_REQUEST_ID))
        return HttpError(
            message,
            status_code=status,
            is_transient=_is_transient_status(status),
            subcode=_http_subcode(status),
            service_message=service_message,
            service_status=service_status,
            correlation_id=sent_headers.get(c.HEADER_CORRELATION_ID),
            request_id=sent_headers.get(c.HEADER_REQUEST_ID),
            body_excerpt=text[:_BODY_EXCERPT_LIMIT] if text and body is None else None,
            retry_after=retry_after,
        )

    @staticmethod
    def _decode(r: requests.Response) -> Any:
        """Decode a success body, unwrapping the ``{"status", "description", "data"}`` envelope."""
        text = getattr(r, "text", "") or ""
        if not text.strip():
            return None
        try:
            body = r.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response body is not valid JSON: {exc}",
                subcode=DESERIALIZATION_INVALID_JSON,
                status_code=r.status_code,
                details={"body_excerpt": text[:_BODY_EXCERPT_LIMIT]},
            ) from exc
        if isinstance(body, dict) and c.ENVELOPE_DATA in body:
            return body[c.ENVELOPE_DATA]
        return body

    def _execute(self, method: str, url: str, **kwargs: Any) -> OperationResult[Any]:
        """Send a request and wrap the decoded result with its response and metadata."""
        sent = self._stamp_headers(kwargs.pop("headers", None))
        start = time.perf_counter()
        r = self._request(method, url, headers=sent, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug("%s %s -> %s in %.1f ms", method.upper(), url, r.status_code, elapsed_ms)
        metadata = RequestMetadata(
            client_request_id=sent.get(c.HEADER_REQUEST_ID),
            correlation_id=sent.get(c.HEADER_CORRELATION_ID),
            method=method.upper(),
            url=url,
            http_status_code=r.status_code,
            timing_ms=elapsed_ms,
        )
        return OperationResult(self._decode(r), metadata, r)

    # ----------------------------- validation ----------------------------
    @staticmethod
    def _require_slug(table_slug: str) -> str:
        slug = (table_slug or "").strip() if isinstance(table_slug, str) else ""
        if not slug:
            raise ValidationError("table_slug is required", subcode=VALIDATION_TABLE_SLUG_MISSING)
        return slug

    @staticmethod
    def _require_mapping(data: Any) -> Dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ValidationError("request data must be a mapping", subcode=VALIDATION_REQUEST_NOT_MAPPING)
        return dict(data)

    @staticmethod
    def _require_guid(data: Mapping[str, Any]) -> str:
        guid = data.get("guid")
        if not isinstance(guid, str) or not guid.strip():
            raise ValidationError("request data must contain a non-empty 'guid'", subcode=VALIDATION_GUID_MISSING)
        return guid.strip()

    @staticmethod
    def _require_pagination(limit: int, page: int) -> None:
        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
            raise ValidationError(
                "limit must be a non-negative integer",
                subcode=VALIDATION_PAGINATION_INVALID,
                details={"limit": limit},
            )
        if not isinstance(page, int) or isinstance(page, bool) or page < 1:
            raise ValidationError(
                "page must be an integer >= 1",
                subcode=VALIDATION_PAGINATION_INVALID,
                details={"page": page},
            )

    # ----------------------------- CRUD ---------------------------------
    def _create_object(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Create one object: POST ``/v1/object/{slug}`` with ``{"data": ...}``."""
        slug = self._require_slug(table_slug)
        payload = {"data": self._require_mapping(data)}
        url = self._url(c.OBJECT_PATH, table_slug=slug)
        return self._execute("post", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload)

    def _get_list(
        self,
        table_slug: str,
        data: Mapping[str, Any],
        limit: int,
        page: int,
        disable_faas: bool = False,
    ) -> OperationResult[Any]:
        """List objects: POST ``/v1/object/get-list/{slug}``; pagination merged into the body."""
        slug = self._require_slug(table_slug)
        self._require_pagination(limit, page)
        body = self._require_mapping(data)
        body.update({"limit": limit, "page": page, "offset": (page - 1) * limit})
        url = self._url(c.OBJECT_GET_LIST_PATH, table_slug=slug)
        return self._execute("post", url, headers=self._headers(), params=self._faas_params(disable_faas), json={"data": body})

    def _get_list_slim(
        self,
        table_slug: str,
        data: Mapping[str, Any],
        limit: int,
        page: int,
        disable_faas: bool = False,
    ) -> OperationResult[Any]:
        """List objects through the slim endpoint: GET with filters JSON-encoded in the ``data`` parameter."""
        slug = self._require_slug(table_slug)
        self._require_pagination(limit, page)
        filters = self._require_mapping(data)
        params = self._faas_params(disable_faas)
        params.update(
            {
                "data": json.dumps(filters, separators=(",", ":"), default=str),
                "limit": str(limit),
                "page": str(page),
                "offset": str((page - 1) * limit),
            }
        )
        url = self._url(c.OBJECT_SLIM_GET_LIST_PATH, table_slug=slug)
        return self._execute("get", url, headers=self._headers(json_body=False), params=params)

    def _get_single(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Fetch one object by ``guid``: GET ``/v1/object/{slug}/{guid}``."""
        slug = self._require_slug(table_slug)
        guid = self._require_guid(self._require_mapping(data))
        url = self._url(c.OBJECT_GUID_PATH, table_slug=slug, guid=guid)
        return self._execute("get", url, headers=self._headers(json_body=False), params=self._faas_params(disable_faas))

    def _get_single_slim(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Fetch one object by ``guid`` through the slim endpoint."""
        slug = self._require_slug(table_slug)
        guid = self._require_guid(self._require_mapping(data))
        url = self._url(c.OBJECT_SLIM_GUID_PATH, table_slug=slug, guid=guid)
        return self._execute("get", url, headers=self._headers(json_body=False), params=self._faas_params(disable_faas))

    def _get_list_aggregation(
        self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False
    ) -> OperationResult[Any]:
        """Forward an aggregation pipeline verbatim: POST ``/v1/object/get-list-aggregation/{slug}``."""
        slug = self._require_slug(table_slug)
        payload = {"data": self._require_mapping(data)}
        url = self._url(c.OBJECT_AGGREGATION_PATH, table_slug=slug)
        return self._execute("post", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload)

    def _update_object(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Update one object: PUT ``/v1/object/{slug}``; the ``guid`` travels inside ``data``."""
        slug = self._require_slug(table_slug)
        payload = {"data": self._require_mapping(data)}
        url = self._url(c.OBJECT_PATH, table_slug=slug)
        return self._execute("put", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload)

    def _multiple_update(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Update many objects: PUT ``/v1/object/multiple-update/{slug}`` (usually ``{"objects": [...]}``)."""
        slug = self._require_slug(table_slug)
        payload = {"data": self._require_mapping(data)}
        url = self._url(c.OBJECT_MULTIPLE_UPDATE_PATH, table_slug=slug)
        return self._execute("put", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload)

    def _delete(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Delete one object by ``guid``: DELETE ``/v1/object/{slug}/{guid}``."""
        slug = self._require_slug(table_slug)
        guid = self._require_guid(self._require_mapping(data))
        url = self._url(c.OBJECT_GUID_PATH, table_slug=slug, guid=guid)
        return self._execute("delete", url, headers=self._headers(), params=self._faas_params(disable_faas), json={})

    def _multiple_delete(self, table_slug: str, data: Mapping[str, Any], disable_faas: bool = False) -> OperationResult[Any]:
        """Delete many objects: DELETE ``/v1/object/{slug}`` with ``{"ids": [...]}``."""
        slug = self._require_slug(table_slug)
        ids = self._require_mapping(data).get("ids")
        if isinstance(ids, (str, bytes)) or not isinstance(ids, (list, tuple)):
            raise ValidationError("request data must contain an 'ids' list", subcode=VALIDATION_IDS_INVALID)
        if not all(isinstance(i, str) and i for i in ids):
            raise ValidationError("'ids' must contain non-empty string GUIDs", subcode=VALIDATION_IDS_INVALID)
        ids_list: List[str] = list(ids)
        url = self._url(c.OBJECT_PATH, table_slug=slug)
        return self._execute(
            "delete", url, headers=self._headers(), params=self._faas_params(disable_faas), json={"ids": ids_list}
        )
