# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""File upload and deletion mixin."""

from __future__ import annotations

import os
from typing import IO, Any, Optional, Union

from ..common import constants as c
from ..core.results import OperationResult

FileSource = Union[str, "os.PathLike[str]", IO[bytes]]


class _FileOperationsMixin:
    """
    Mixin providing multipart upload and file deletion.

    Depends on ``self.base_url``, ``self._headers()``, ``self._url()`` and
    ``self._execute()`` from _ObjectClient.
    """

    def _upload_file(
        self,
        source: FileSource,
        folder_name: str = c.DEFAULT_FOLDER_NAME,
        filename: Optional[str] = None,
    ) -> OperationResult[Any]:
        """
        Upload a file: multipart POST to ``/v1/files/folder_upload``.

        :param source: Path of a local file, or a binary file object.
        :param folder_name: Target folder on the platform.
        :param filename: Name sent with the part. Defaults to the basename of ``source``.
        """
        url = self.base_url + c.FILE_UPLOAD_PATH
        params = {c.PARAM_FOLDER_NAME: folder_name}
        # requests sets the multipart Content-Type itself
        headers = self._headers(json_body=False)
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            with open(path, "rb") as fh:
                files = {"file": (filename or os.path.basename(path), fh)}
                return self._execute("post", url, headers=headers, params=params, files=files)
        name = filename or os.path.basename(getattr(source, "name", "") or "") or "upload"
        return self._execute("post", url, headers=headers, params=params, files={"file": (name, source)})

    def _delete_file(self, file_id: str) -> OperationResult[Any]:
        """Delete an uploaded file: DELETE ``/v1/files/{file_id}``."""
        url = self._url(c.FILE_PATH, file_id=file_id)
        return self._execute("delete", url, headers=self._headers(json_body=False))
