# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Many-to-many relation payload model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

__all__ = ["ManyToManyRelation"]

_REQUIRED_FIELDS = ("table_from", "table_to", "id_from")


def _normalize_ids(id_to: Any) -> List[str]:
    if id_to is None:
        return []
    if isinstance(id_to, str):
        return [id_to]
    return list(id_to)


@dataclass
class ManyToManyRelation:
    """Descriptor linking one record to records of another table.

    An empty ``id_to`` is sent as ``[]``; the platform treats it as
    "all related records".

    :param table_from: Slug of the owning table.
    :type table_from: str
    :param table_to: Slug of the related table.
    :type table_to: str
    :param id_from: GUID of the owning record.
    :type id_from: str
    :param id_to: GUIDs of the related records.
    :type id_to: list[str]
    """

    table_from: str
    table_to: str
    id_from: str
    id_to: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.id_to = _normalize_ids(self.id_to)

    @classmethod
    def from_mapping(cls, data: Union["ManyToManyRelation", Mapping[str, Any]]) -> "ManyToManyRelation":
        """Build a relation from a mapping, normalizing ``id_to`` into a list.

        Missing required fields are left empty; callers validate them with
        :meth:`missing_fields`.
        """
        if isinstance(data, ManyToManyRelation):
            return data
        return cls(
            table_from=data.get("table_from") or "",
            table_to=data.get("table_to") or "",
            id_from=data.get("id_from") or "",
            id_to=data.get("id_to"),
        )

    def missing_fields(self) -> List[str]:
        return [name for name in _REQUIRED_FIELDS if not getattr(self, name)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_from": self.table_from,
            "table_to": self.table_to,
            "id_from": self.id_from,
            "id_to": list(self.id_to),
        }
