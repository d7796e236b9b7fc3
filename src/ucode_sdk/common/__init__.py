# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common utilities and constants for the UCode SDK.

This module contains endpoint templates, header names, and default values
shared across the SDK.
"""

__all__ = []
