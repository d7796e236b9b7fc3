# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the UCode SDK.

This module contains the foundational components including configuration,
HTTP transport, result types, and error handling.
"""

from .results import OperationResult, RequestMetadata, UcodeResponse

__all__ = [
    "OperationResult",
    "RequestMetadata",
    "UcodeResponse",
]
