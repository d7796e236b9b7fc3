# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Authentication endpoint mixin for the UCode auth service."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..common import constants as c
from ..core.results import OperationResult


class _AuthOperationsMixin:
    """
    Mixin providing register/login/send-code/reset-password calls.

    Depends on ``self.auth_url``, ``self.config``, ``self._headers()``,
    ``self._require_mapping()`` and ``self._execute()`` from _ObjectClient.
    """

    def _auth_headers(self) -> Dict[str, str]:
        headers = self._headers()
        if self.config.project_id:
            headers[c.HEADER_RESOURCE_ID] = self.config.project_id
        if self.config.environment_id:
            headers[c.HEADER_ENVIRONMENT_ID] = self.config.environment_id
        return headers

    def _register(self, data: Mapping[str, Any]) -> OperationResult[Any]:
        params = {c.PARAM_PROJECT_ID: self.config.project_id} if self.config.project_id else None
        return self._execute(
            "post",
            self.auth_url + c.AUTH_REGISTER_PATH,
            headers=self._auth_headers(),
            params=params,
            json=self._require_mapping(data),
        )

    def _login(self, data: Mapping[str, Any]) -> OperationResult[Any]:
        return self._execute(
            "post", self.auth_url + c.AUTH_LOGIN_PATH, headers=self._auth_headers(), json=self._require_mapping(data)
        )

    def _send_code(self, data: Mapping[str, Any]) -> OperationResult[Any]:
        return self._execute(
            "post", self.auth_url + c.AUTH_SEND_CODE_PATH, headers=self._auth_headers(), json=self._require_mapping(data)
        )

    def _reset_password(self, data: Mapping[str, Any]) -> OperationResult[Any]:
        return self._execute(
            "put",
            self.auth_url + c.AUTH_RESET_PASSWORD_PATH,
            headers=self._auth_headers(),
            json=self._require_mapping(data),
        )
