# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..common.constants import DEFAULT_AUTH_URL, DEFAULT_BASE_URL

ENV_APP_ID = "UCODE_APP_ID"
ENV_APP_ID_FALLBACK = "APP_ID"
ENV_BASE_URL = "UCODE_BASE_URL"
ENV_AUTH_URL = "UCODE_AUTH_URL"
ENV_FUNCTION_NAME = "UCODE_FUNCTION_NAME"
ENV_REQUEST_TIMEOUT = "UCODE_REQUEST_TIMEOUT"
ENV_PROJECT_ID = "UCODE_PROJECT_ID"
ENV_ENVIRONMENT_ID = "UCODE_ENVIRONMENT_ID"


@dataclass(frozen=True)
class UcodeConfig:
    """
    Configuration settings for UCode client operations.

    Instances are immutable and can be shared between threads issuing
    independent requests.

    :param base_url: Platform API URL, e.g. ``"https://api.admin.u-code.io"``.
    :type base_url: str
    :param app_id: Application identifier sent as the ``X-API-KEY`` header.
    :type app_id: str
    :param function_name: Default function path for ``client.functions.invoke``.
    :type function_name: str
    :param request_timeout: Request timeout in seconds (default: method-dependent).
    :type request_timeout: float or None
    :param base_auth_url: Auth service URL used by ``client.auth``.
    :type base_auth_url: str
    :param project_id: Project identifier for auth registration.
    :type project_id: str
    :param environment_id: Environment identifier for auth requests.
    :type environment_id: str
    """

    base_url: str = DEFAULT_BASE_URL
    app_id: str = ""
    function_name: str = ""
    request_timeout: Optional[float] = None

    # Auth service settings
    base_auth_url: str = DEFAULT_AUTH_URL
    project_id: str = ""
    environment_id: str = ""

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "UcodeConfig":
        """
        Create a configuration instance from environment variables.

        A ``.env`` file is loaded first; variables already present in the
        environment are not overwritten.

        :param dotenv_path: Optional explicit path of the ``.env`` file.
        :type dotenv_path: str or None
        :return: Configuration instance.
        :rtype: ~ucode_sdk.core.config.UcodeConfig
        :raises ValueError: If no application identifier is set.
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)

        app_id = os.environ.get(ENV_APP_ID) or os.environ.get(ENV_APP_ID_FALLBACK) or ""
        if not app_id:
            raise ValueError(f"{ENV_APP_ID} (or {ENV_APP_ID_FALLBACK}) must be set.")

        timeout_raw = os.environ.get(ENV_REQUEST_TIMEOUT, "").strip()
        try:
            request_timeout = float(timeout_raw) if timeout_raw else None
        except ValueError:
            raise ValueError(f"{ENV_REQUEST_TIMEOUT} must be a number of seconds, got {timeout_raw!r}.") from None

        return cls(
            base_url=os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            app_id=app_id,
            function_name=os.environ.get(ENV_FUNCTION_NAME, ""),
            request_timeout=request_timeout,
            base_auth_url=os.environ.get(ENV_AUTH_URL) or DEFAULT_AUTH_URL,
            project_id=os.environ.get(ENV_PROJECT_ID, ""),
            environment_id=os.environ.get(ENV_ENVIRONMENT_ID, ""),
        )
