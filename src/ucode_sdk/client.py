# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Union

import requests

from .core.config import UcodeConfig
from .core.results import OperationResult
from .data._objects import _ObjectClient
from .models.argument import Argument
from .models.relation import ManyToManyRelation
from .operations.auth import AuthOperations
from .operations.files import FileOperations
from .operations.functions import FunctionOperations
from .operations.items import ItemOperations
from .operations.relations import RelationOperations


class UcodeClient:
    """
    High-level client for the UCode platform API.

    Every public method maps to exactly one HTTP request. Results come back
    as :class:`~ucode_sdk.core.results.OperationResult`, which behaves like
    the decoded ``data`` of the response and keeps the raw
    :class:`requests.Response` in ``.response``. Failures raise
    :class:`~ucode_sdk.core.errors.UcodeError` subclasses (or
    ``requests`` transport exceptions); nothing is retried.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager pools connections in a
        :class:`requests.Session` and closes it on exit::

            with UcodeClient(UcodeConfig(app_id="...")) as client:
                client.create_object(Argument("order", {"title": "First"}))

    **Without Context Manager**:
        Each request opens its own connection. Call ``close()`` when done::

            client = UcodeClient()
            try:
                client.get_list(ArgumentWithPagination("order", limit=5))
            finally:
                client.close()

    Operations are available both as flat methods (``client.get_list(arg)``)
    and grouped under namespaces:

    - ``client.items``: object CRUD, listing, aggregation, DataFrame helpers
    - ``client.relations``: many-to-many links
    - ``client.auth``: register, login, verification codes, password reset
    - ``client.files``: upload and delete files
    - ``client.functions``: invoke serverless functions

    :param config: Client configuration. Loaded with
        :meth:`~ucode_sdk.core.config.UcodeConfig.from_env` when omitted.
    :type config: ~ucode_sdk.core.config.UcodeConfig or None

    :raises ValueError: If ``base_url`` or ``app_id`` is empty.

    .. note::
        The config is immutable and the client keeps no per-call state, so one
        instance may serve concurrent callers. The pooled session is shared
        across threads the same way ``requests.Session`` is.
    """

    def __init__(self, config: Optional[UcodeConfig] = None) -> None:
        self._config = config or UcodeConfig.from_env()
        if not (self._config.base_url or "").rstrip("/"):
            raise ValueError("base_url is required.")
        if not self._config.app_id:
            raise ValueError("app_id is required.")
        self._objects: Optional[_ObjectClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        self.items = ItemOperations(self)
        self.relations = RelationOperations(self)
        self.auth = AuthOperations(self)
        self.files = FileOperations(self)
        self.functions = FunctionOperations(self)

    @property
    def config(self) -> UcodeConfig:
        return self._config

    def __enter__(self) -> "UcodeClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling. All operations within
        the context reuse this session.
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebind so the pooled session is picked up
            if self._objects is not None:
                self._objects.close()
                self._objects = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager, closing the session. Exceptions are not suppressed."""
        self.close()

    def close(self) -> None:
        """
        Close the client and release resources.

        Safe to call multiple times.
        """
        if self._objects is not None:
            self._objects.close()
            self._objects = None
        if self._session is not None and self._owns_session:
            self._session.close()
        self._session = None
        self._owns_session = False

    def _get_objects(self) -> _ObjectClient:
        """
        Get or create the internal low-level client.

        Construction is deferred until the first API call. When a session exists
        (from the context manager), it is handed to the low-level client.
        """
        if self._objects is None:
            self._objects = _ObjectClient(self._config, session=self._session)
        return self._objects

    @contextmanager
    def _scoped_objects(self) -> Iterator[_ObjectClient]:
        """Yield the low-level client while ensuring a correlation scope is active."""
        ob = self._get_objects()
        with ob._call_scope():
            yield ob

    # ---------------- Flat API: one method per remote operation ----------------
    def create_object(self, arg: Argument) -> OperationResult[Any]:
        """Create one object. See :meth:`ItemOperations.create_object`."""
        return self.items.create_object(arg)

    def get_list(self, arg: Argument) -> OperationResult[Any]:
        """List objects with pagination. See :meth:`ItemOperations.get_list`."""
        return self.items.get_list(arg)

    def get_list_slim(self, arg: Argument) -> OperationResult[Any]:
        return self.items.get_list_slim(arg)

    def get_single(self, arg: Argument) -> OperationResult[Any]:
        """Fetch one object by ``guid``. See :meth:`ItemOperations.get_single`."""
        return self.items.get_single(arg)

    def get_single_slim(self, arg: Argument) -> OperationResult[Any]:
        return self.items.get_single_slim(arg)

    def get_list_aggregation(self, arg: Argument) -> OperationResult[Any]:
        """Forward an aggregation pipeline. See :meth:`ItemOperations.get_list_aggregation`."""
        return self.items.get_list_aggregation(arg)

    def update_object(self, arg: Argument) -> OperationResult[Any]:
        return self.items.update_object(arg)

    def multiple_update(self, arg: Argument) -> OperationResult[Any]:
        return self.items.multiple_update(arg)

    def delete(self, arg: Argument) -> OperationResult[Any]:
        """Delete one object by ``guid``. See :meth:`ItemOperations.delete`."""
        return self.items.delete(arg)

    def multiple_delete(self, arg: Argument) -> OperationResult[Any]:
        return self.items.multiple_delete(arg)

    def append_many_to_many(self, arg: Union[Argument, ManyToManyRelation]) -> OperationResult[Any]:
        """Link records. See :meth:`RelationOperations.append_many_to_many`."""
        return self.relations.append_many_to_many(arg)

    def delete_many_to_many(self, arg: Union[Argument, ManyToManyRelation]) -> OperationResult[Any]:
        """Unlink records. See :meth:`RelationOperations.delete_many_to_many`."""
        return self.relations.delete_many_to_many(arg)


__all__ = ["UcodeClient"]
