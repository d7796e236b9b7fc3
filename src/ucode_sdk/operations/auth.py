# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Authentication operations namespace."""

from __future__ import annotations

from typing import Any, Dict, TYPE_CHECKING

from ..core.results import OperationResult

if TYPE_CHECKING:
    from ..client import UcodeClient


class AuthOperations:
    """
    End-user authentication against the auth service.

    Accessed via ``client.auth``. Requests go to ``config.base_auth_url``
    and carry ``Resource-Id``/``Environment-Id`` headers when
    ``project_id``/``environment_id`` are configured. Payloads are passed
    through as-is.

    Example::

        client.auth.register({"type": "email", "data": {"email": "a@b.c", "password": "secret"}})
        session = client.auth.login({"username": "a@b.c", "password": "secret"})
    """

    def __init__(self, client: "UcodeClient") -> None:
        self._client = client

    def register(self, data: Dict[str, Any]) -> OperationResult[Any]:
        """Register a user. ``project-id`` is added as a query parameter when configured."""
        with self._client._scoped_objects() as ob:
            return ob._register(data)

    def login(self, data: Dict[str, Any]) -> OperationResult[Any]:
        """Log a user in and return the session payload."""
        with self._client._scoped_objects() as ob:
            return ob._login(data)

    def send_code(self, data: Dict[str, Any]) -> OperationResult[Any]:
        """Send a verification code (SMS or e-mail, per the payload)."""
        with self._client._scoped_objects() as ob:
            return ob._send_code(data)

    def reset_password(self, data: Dict[str, Any]) -> OperationResult[Any]:
        with self._client._scoped_objects() as ob:
            return ob._reset_password(data)


__all__ = ["AuthOperations"]
