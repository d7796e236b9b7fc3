# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Object CRUD operations namespace."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import pandas as pd

from ..core.results import OperationResult
from ..models.argument import DEFAULT_LIMIT, DEFAULT_PAGE, Argument, ArgumentWithPagination
from ..utils._pandas import dataframe_to_records, extract_list_records, records_to_dataframe

if TYPE_CHECKING:
    from ..client import UcodeClient


def _check_argument(arg: Any) -> Argument:
    if not isinstance(arg, Argument):
        raise TypeError("arg must be an Argument")
    return arg


def _pagination(arg: Argument) -> tuple:
    if isinstance(arg, ArgumentWithPagination):
        return arg.limit, arg.page
    data = arg.data
    return data.get("limit", DEFAULT_LIMIT), data.get("page", DEFAULT_PAGE)


class ItemOperations:
    """
    Object operations on table slugs.

    Accessed via ``client.items``. Every method takes an
    :class:`~ucode_sdk.models.argument.Argument` (or
    :class:`~ucode_sdk.models.argument.ArgumentWithPagination` for listing),
    issues exactly one HTTP request and returns an
    :class:`~ucode_sdk.core.results.OperationResult` holding the decoded
    ``data`` member of the response envelope. Failures raise.

    Example::

        created = client.items.create_object(
            Argument("order", {"title": "First order"}, disable_faas=True)
        )
        guid = created["data"]["guid"]

        page = client.items.get_list(
            ArgumentWithPagination("order", {"status": "new"}, limit=20, page=2)
        )
        print(page["data"]["count"])

        client.items.delete(Argument("order", {"guid": guid}))
    """

    def __init__(self, client: "UcodeClient") -> None:
        """
        Initialize ItemOperations.

        :param client: Parent UcodeClient instance.
        :type client: UcodeClient
        """
        self._client = client

    def create_object(self, arg: Argument) -> OperationResult[Any]:
        """
        Create one object in ``arg.table_slug`` from ``arg.request.data``.

        :param arg: Table slug and field values.
        :type arg: Argument
        :return: Result wrapping the created object as returned by the platform.
        :rtype: OperationResult

        :raises TypeError: If ``arg`` is not an Argument.
        :raises ValidationError: If the table slug is empty.
        :raises HttpError: If the platform answers with a non-2xx status.
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._create_object(arg.table_slug, arg.data, arg.disable_faas)

    def get_list(self, arg: Argument) -> OperationResult[Any]:
        """
        List objects matching the filters in ``arg.request.data``.

        ``limit`` and ``page`` are sent unchanged, together with the derived
        ``offset``. A plain :class:`Argument` reads ``limit`` and ``page`` from
        its data, falling back to ``limit=10, page=1``.

        :param arg: Table slug, filters and pagination.
        :type arg: ArgumentWithPagination or Argument
        :return: Result wrapping ``{"table_slug": ..., "data": {"count": n, "response": [...]}}``.
        :rtype: OperationResult

        :raises ValidationError: If the table slug is empty or pagination is invalid.
        """
        arg = _check_argument(arg)
        limit, page = _pagination(arg)
        with self._client._scoped_objects() as ob:
            return ob._get_list(arg.table_slug, arg.data, limit, page, arg.disable_faas)

    def get_list_slim(self, arg: Argument) -> OperationResult[Any]:
        """
        List objects through the lightweight endpoint.

        Filters are JSON-encoded into the ``data`` query parameter of a GET request.

        :param arg: Table slug, filters and pagination.
        :type arg: ArgumentWithPagination or Argument
        :rtype: OperationResult
        """
        arg = _check_argument(arg)
        limit, page = _pagination(arg)
        with self._client._scoped_objects() as ob:
            return ob._get_list_slim(arg.table_slug, arg.data, limit, page, arg.disable_faas)

    def get_single(self, arg: Argument) -> OperationResult[Any]:
        """
        Fetch one object by the ``guid`` in ``arg.request.data``.

        :raises ValidationError: If ``guid`` is missing.
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._get_single(arg.table_slug, arg.data, arg.disable_faas)

    def get_single_slim(self, arg: Argument) -> OperationResult[Any]:
        """Fetch one object by ``guid`` through the lightweight endpoint."""
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._get_single_slim(arg.table_slug, arg.data, arg.disable_faas)

    def get_list_aggregation(self, arg: Argument) -> OperationResult[Any]:
        """
        Run an aggregation pipeline on the platform.

        ``arg.request.data`` is forwarded verbatim; the pipeline stages are
        not inspected.

        Example::

            client.items.get_list_aggregation(Argument("order", {
                "pipelines": [
                    {"$match": {"status": "paid"}},
                    {"$group": {"_id": "$client_id", "total": {"$sum": "$amount"}}},
                ]
            }))
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._get_list_aggregation(arg.table_slug, arg.data, arg.disable_faas)

    def update_object(self, arg: Argument) -> OperationResult[Any]:
        """
        Update one object. ``arg.request.data`` must carry the ``guid`` and the changed fields.
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._update_object(arg.table_slug, arg.data, arg.disable_faas)

    def multiple_update(self, arg: Argument) -> OperationResult[Any]:
        """
        Update many objects in one request.

        Example::

            client.items.multiple_update(Argument("order", {
                "objects": [
                    {"guid": id1, "status": "shipped"},
                    {"guid": id2, "status": "shipped"},
                ]
            }))
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._multiple_update(arg.table_slug, arg.data, arg.disable_faas)

    def delete(self, arg: Argument) -> OperationResult[Any]:
        """
        Delete one object by the ``guid`` in ``arg.request.data``.

        :raises ValidationError: If ``guid`` is missing.
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._delete(arg.table_slug, arg.data, arg.disable_faas)

    def multiple_delete(self, arg: Argument) -> OperationResult[Any]:
        """
        Delete many objects by the ``ids`` list in ``arg.request.data``.

        :raises ValidationError: If ``ids`` is missing or not a list of GUID strings.
        """
        arg = _check_argument(arg)
        with self._client._scoped_objects() as ob:
            return ob._multiple_delete(arg.table_slug, arg.data, arg.disable_faas)

    # ----------------------------------------------------------- dataframes

    def get_list_dataframe(self, arg: Argument) -> pd.DataFrame:
        """
        Fetch one page with :meth:`get_list` and return its records as a DataFrame.

        :return: One row per record; empty DataFrame when the page is empty.
        :rtype: pandas.DataFrame
        """
        result = self.get_list(arg)
        return records_to_dataframe(extract_list_records(result.value))

    def multiple_update_dataframe(
        self,
        table_slug: str,
        df: pd.DataFrame,
        *,
        disable_faas: bool = False,
        na_as_null: bool = False,
    ) -> OperationResult[Any]:
        """
        Send each DataFrame row as one entry of ``objects`` to :meth:`multiple_update`.

        Every row must carry a ``guid`` column value.

        :param na_as_null: Send missing values as null instead of omitting them.
        :raises TypeError: If ``df`` is not a DataFrame.
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")
        objects = dataframe_to_records(df, na_as_null=na_as_null)
        return self.multiple_update(Argument(table_slug, {"objects": objects}, disable_faas=disable_faas))


__all__ = ["ItemOperations"]
