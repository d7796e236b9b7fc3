# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock

from ucode_sdk.client import UcodeClient
from ucode_sdk.core.config import UcodeConfig


class TestSupplementaryNamespaces(unittest.TestCase):
    """Delegation of client.auth, client.files and client.functions."""

    def setUp(self):
        self.client = UcodeClient(UcodeConfig(base_url="https://api.example.com", app_id="app-123"))
        self.client._objects = MagicMock()

    def test_auth_methods(self):
        self.client.auth.register({"type": "phone"})
        self.client.auth.login({"username": "u"})
        self.client.auth.send_code({"recipient": "+100"})
        self.client.auth.reset_password({"password": "p"})
        self.client._objects._register.assert_called_once_with({"type": "phone"})
        self.client._objects._login.assert_called_once_with({"username": "u"})
        self.client._objects._send_code.assert_called_once_with({"recipient": "+100"})
        self.client._objects._reset_password.assert_called_once_with({"password": "p"})

    def test_files_upload(self):
        self.client.files.upload("report.pdf", folder_name="Reports")
        self.client._objects._upload_file.assert_called_once_with("report.pdf", folder_name="Reports", filename=None)

    def test_files_delete(self):
        self.client.files.delete("f-1")
        self.client._objects._delete_file.assert_called_once_with("f-1")

    def test_files_delete_requires_id(self):
        with self.assertRaises(TypeError):
            self.client.files.delete("")
        self.client._objects._delete_file.assert_not_called()

    def test_functions_invoke(self):
        self.client.functions.invoke("send-invoice", {"order_id": "g-1"}, disable_faas=True)
        self.client._objects._invoke_function.assert_called_once_with("send-invoice", {"order_id": "g-1"}, True)
