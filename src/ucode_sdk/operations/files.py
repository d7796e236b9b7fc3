# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""File operations namespace."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from ..common.constants import DEFAULT_FOLDER_NAME
from ..core.results import OperationResult
from ..data._files import FileSource

if TYPE_CHECKING:
    from ..client import UcodeClient


class FileOperations:
    """
    File storage operations.

    Accessed via ``client.files``.

    Example::

        uploaded = client.files.upload("invoice.pdf", folder_name="Invoices")
        client.files.delete(uploaded["id"])
    """

    def __init__(self, client: "UcodeClient") -> None:
        self._client = client

    def upload(
        self,
        source: FileSource,
        *,
        folder_name: str = DEFAULT_FOLDER_NAME,
        filename: Optional[str] = None,
    ) -> OperationResult[Any]:
        """
        Upload a local file or binary file object.

        :param source: File path or binary file object. Paths are opened and closed by the SDK.
        :param folder_name: Target folder on the platform (default ``"Media"``).
        :param filename: Name to send; defaults to the source's basename.
        :raises OSError: If ``source`` is a path that cannot be opened.
        """
        with self._client._scoped_objects() as ob:
            return ob._upload_file(source, folder_name=folder_name, filename=filename)

    def delete(self, file_id: str) -> OperationResult[Any]:
        """
        Delete an uploaded file by id.

        :raises TypeError: If ``file_id`` is not a non-empty string.
        """
        if not isinstance(file_id, str) or not file_id:
            raise TypeError("file_id must be a non-empty str")
        with self._client._scoped_objects() as ob:
            return ob._delete_file(file_id)


__all__ = ["FileOperations"]
