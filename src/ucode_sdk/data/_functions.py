# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Serverless function invocation mixin."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common import constants as c
from ..core._error_codes import VALIDATION_FUNCTION_PATH_MISSING
from ..core.errors import ValidationError
from ..core.results import OperationResult


class _FunctionOperationsMixin:
    """
    Mixin providing function invocation.

    Depends on ``self.config``, ``self._headers()``, ``self._url()``,
    ``self._faas_params()``, ``self._require_mapping()`` and ``self._execute()``.
    """

    def _invoke_function(
        self,
        function_path: Optional[str],
        data: Optional[Mapping[str, Any]] = None,
        disable_faas: bool = False,
    ) -> OperationResult[Any]:
        """Invoke a function: POST ``/v1/invoke_function/{path}`` with ``{"data": ...}``."""
        path = (function_path or self.config.function_name or "").strip()
        if not path:
            raise ValidationError(
                "function path is required when no function_name is configured",
                subcode=VALIDATION_FUNCTION_PATH_MISSING,
            )
        url = self._url(c.INVOKE_FUNCTION_PATH, function_path=path)
        payload = {"data": self._require_mapping(data)}
        return self._execute("post", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload)
