# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Many-to-many relation operations namespace."""

from __future__ import annotations

from typing import Any, Union, TYPE_CHECKING

from ..core.results import OperationResult
from ..models.argument import Argument
from ..models.relation import ManyToManyRelation

if TYPE_CHECKING:
    from ..client import UcodeClient


def _unpack(arg: Union[Argument, ManyToManyRelation], disable_faas: bool):
    if isinstance(arg, Argument):
        return arg.data, arg.disable_faas or disable_faas
    if isinstance(arg, ManyToManyRelation):
        return arg, disable_faas
    raise TypeError("arg must be an Argument or a ManyToManyRelation")


class RelationOperations:
    """
    Many-to-many link management.

    Accessed via ``client.relations``. The relation is described by
    ``table_from``, ``table_to``, ``id_from`` and ``id_to``, either inside
    an :class:`~ucode_sdk.models.argument.Argument` payload or as a
    :class:`~ucode_sdk.models.relation.ManyToManyRelation`.

    Example::

        client.relations.append_many_to_many(ManyToManyRelation(
            table_from="doctor", table_to="clinic", id_from=doctor_id, id_to=[clinic_id],
        ))

        # Empty id_to unlinks every related clinic
        client.relations.delete_many_to_many(Argument(request={
            "table_from": "doctor", "table_to": "clinic", "id_from": doctor_id, "id_to": [],
        }))
    """

    def __init__(self, client: "UcodeClient") -> None:
        self._client = client

    def append_many_to_many(
        self, arg: Union[Argument, ManyToManyRelation], *, disable_faas: bool = False
    ) -> OperationResult[Any]:
        """
        Link ``id_from`` to each record in ``id_to``.

        :param arg: Relation descriptor. ``Argument.table_slug`` is ignored.
        :param disable_faas: Skip serverless triggers (also honoured from ``Argument.disable_faas``).
        :raises ValidationError: If ``table_from``, ``table_to`` or ``id_from`` is missing.
        """
        relation, skip = _unpack(arg, disable_faas)
        with self._client._scoped_objects() as ob:
            return ob._append_many_to_many(relation, skip)

    def delete_many_to_many(
        self, arg: Union[Argument, ManyToManyRelation], *, disable_faas: bool = False
    ) -> OperationResult[Any]:
        """
        Unlink ``id_from`` from the records in ``id_to``.

        ``id_to`` is always serialized; an empty list applies to all related records.
        """
        relation, skip = _unpack(arg, disable_faas)
        with self._client._scoped_objects() as ob:
            return ob._delete_many_to_many(relation, skip)


__all__ = ["RelationOperations"]
