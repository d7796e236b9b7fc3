# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utility functions and helpers for the UCode SDK.

This module contains DataFrame conversion helpers used by the items namespace.
"""

__all__ = []
