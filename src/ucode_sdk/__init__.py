# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Python client for the UCode platform HTTP API.

Provides object CRUD on table slugs, many-to-many relationship management,
pagination, aggregation passthrough, authentication, file and function
endpoints.
"""

from .client import UcodeClient
from .core.config import UcodeConfig
from .core.errors import DeserializationError, HttpError, UcodeError, ValidationError
from .core.results import OperationResult, RequestMetadata, UcodeResponse
from .models.argument import Argument, ArgumentWithPagination, Request
from .models.relation import ManyToManyRelation

__version__ = "0.1.0"

__all__ = [
    "UcodeClient",
    "UcodeConfig",
    "UcodeError",
    "HttpError",
    "ValidationError",
    "DeserializationError",
    "OperationResult",
    "RequestMetadata",
    "UcodeResponse",
    "Argument",
    "ArgumentWithPagination",
    "Request",
    "ManyToManyRelation",
]
