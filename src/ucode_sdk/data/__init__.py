# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the UCode SDK.

This module contains the low-level client that builds and executes HTTP
requests against the platform API. It is internal; use the operation
namespaces on :class:`~ucode_sdk.client.UcodeClient` instead.
"""

__all__ = []
