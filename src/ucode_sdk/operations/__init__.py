# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the UCode SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- ItemOperations: object CRUD, listing and aggregation on table slugs
- RelationOperations: many-to-many link management
- AuthOperations: register, login, verification codes, password reset
- FileOperations: file upload and deletion
- FunctionOperations: serverless function invocation
"""

__all__ = []
