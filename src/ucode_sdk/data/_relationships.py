# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Many-to-many relationship operations for the UCode platform API.

This module provides mixin functionality for linking and unlinking records.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from ..common import constants as c
from ..core._error_codes import VALIDATION_RELATION_FIELD_MISSING
from ..core.errors import ValidationError
from ..core.results import OperationResult
from ..models.relation import ManyToManyRelation


class _RelationshipOperationsMixin:
    """
    Mixin providing many-to-many relationship operations.

    This mixin is designed to be used with _ObjectClient and depends on:
    - self.base_url: The API base URL
    - self._headers(): Method to get auth headers
    - self._execute(): Method to send a request and decode the result
    """

    def _relation_payload(self, relation: Union[ManyToManyRelation, Mapping[str, Any]]) -> dict:
        if not isinstance(relation, (ManyToManyRelation, Mapping)):
            raise ValidationError(
                "relation must be a ManyToManyRelation or a mapping",
                subcode=VALIDATION_RELATION_FIELD_MISSING,
            )
        rel = ManyToManyRelation.from_mapping(relation)
        missing = rel.missing_fields()
        if missing:
            raise ValidationError(
                f"many-to-many relation is missing: {', '.join(missing)}",
                subcode=VALIDATION_RELATION_FIELD_MISSING,
                details={"missing": missing},
            )
        return rel.to_dict()

    def _append_many_to_many(
        self,
        relation: Union[ManyToManyRelation, Mapping[str, Any]],
        disable_faas: bool = False,
    ) -> OperationResult[Any]:
        """
        Link ``id_from`` to every GUID in ``id_to``.

        PUTs ``{"table_from", "table_to", "id_from", "id_to"}`` to ``/v1/many-to-many``.

        :raises ValidationError: If a required relation field is missing.
        :raises HttpError: If the API request fails.
        """
        payload = self._relation_payload(relation)
        url = self.base_url + c.MANY_TO_MANY_PATH
        return self._execute("put", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload)

    def _delete_many_to_many(
        self,
        relation: Union[ManyToManyRelation, Mapping[str, Any]],
        disable_faas: bool = False,
    ) -> OperationResult[Any]:
        """
        Unlink ``id_from`` from the GUIDs in ``id_to``.

        An empty ``id_to`` is sent as ``[]``, which the platform applies to
        all related records.

        :raises ValidationError: If a required relation field is missing.
        :raises HttpError: If the API request fails.
        """
        payload = self._relation_payload(relation)
        url = self.base_url + c.MANY_TO_MANY_PATH
        return self._execute(
            "delete", url, headers=self._headers(), params=self._faas_params(disable_faas), json=payload
        )
