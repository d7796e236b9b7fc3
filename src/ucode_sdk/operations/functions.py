# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Serverless function operations namespace."""

from __future__ import annotations

from typing import Any, Dict, Optional, TYPE_CHECKING

from ..core.results import OperationResult

if TYPE_CHECKING:
    from ..client import UcodeClient


class FunctionOperations:
    """
    Invoke serverless functions deployed on the platform.

    Accessed via ``client.functions``.

    Example::

        result = client.functions.invoke("send-invoice", {"order_id": guid})
    """

    def __init__(self, client: "UcodeClient") -> None:
        self._client = client

    def invoke(
        self,
        function_path: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        *,
        disable_faas: bool = False,
    ) -> OperationResult[Any]:
        """
        Invoke a function with ``{"data": data}`` as body.

        :param function_path: Function path; defaults to ``config.function_name``.
        :raises ValidationError: If no path is given and none is configured.
        """
        with self._client._scoped_objects() as ob:
            return ob._invoke_function(function_path, data, disable_faas)


__all__ = ["FunctionOperations"]
