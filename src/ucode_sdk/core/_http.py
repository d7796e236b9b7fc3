# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client with timeout handling and optional session support.

This module provides :class:`~ucode_sdk.core._http._HttpClient`, a thin wrapper
around the requests library that applies default timeouts per HTTP method
and optionally reuses a session for connection pooling. Each call is a single
round trip; failures are surfaced to the caller without retrying.
"""

from __future__ import annotations

from typing import Any, Optional

import requests


class _HttpClient:
    """
    HTTP client with timeout handling and optional session support.

    :param timeout: Default request timeout in seconds. If None, uses per-method defaults.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection pooling. If provided,
        all requests use this session for efficient connection reuse.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request with timeout management.

        Applies default timeouts based on HTTP method (120s for POST/PUT/DELETE, 30s for others)
        unless a timeout is passed explicitly or configured on the client.

        :param method: HTTP method (GET, POST, PUT, DELETE).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, params, json, files.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If the request fails at the transport level.
        """
        if "timeout" not in kwargs:
            if self.default_timeout is not None:
                kwargs["timeout"] = self.default_timeout
            else:
                m = (method or "").lower()
                kwargs["timeout"] = 120 if m in ("post", "put", "delete") else 30

        if self._session is not None:
            return self._session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
