# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock, patch

from ucode_sdk.client import UcodeClient
from ucode_sdk.core.config import UcodeConfig
from ucode_sdk.data._objects import _ObjectClient
from ucode_sdk.models.argument import Argument, ArgumentWithPagination


class TestUcodeClient(unittest.TestCase):
    def setUp(self):
        """Set up test fixtures before each test method."""
        self.config = UcodeConfig(base_url="https://api.example.com", app_id="app-123")
        self.client = UcodeClient(self.config)

        # Mock the internal object client so no HTTP calls are made
        self.client._objects = MagicMock()

    def test_requires_app_id(self):
        with self.assertRaises(ValueError):
            UcodeClient(UcodeConfig(base_url="https://api.example.com", app_id=""))

    def test_requires_base_url(self):
        with self.assertRaises(ValueError):
            UcodeClient(UcodeConfig(base_url="/", app_id="app"))

    def test_config_loaded_from_env_when_omitted(self):
        with patch("ucode_sdk.client.UcodeConfig.from_env", return_value=self.config) as from_env:
            client = UcodeClient()
        from_env.assert_called_once_with()
        self.assertIs(client.config, self.config)

    def test_lazy_object_client(self):
        client = UcodeClient(self.config)
        self.assertIsNone(client._objects)
        ob = client._get_objects()
        self.assertIsInstance(ob, _ObjectClient)
        self.assertIs(client._get_objects(), ob)

    def test_flat_object_methods_delegate(self):
        arg = Argument("order", {"guid": "g-1"}, disable_faas=True)
        page = ArgumentWithPagination("order", {}, limit=3, page=2)

        self.client.create_object(arg)
        self.client.get_single(arg)
        self.client.get_single_slim(arg)
        self.client.get_list(page)
        self.client.get_list_slim(page)
        self.client.get_list_aggregation(arg)
        self.client.update_object(arg)
        self.client.multiple_update(arg)
        self.client.delete(arg)

        ob = self.client._objects
        ob._create_object.assert_called_once_with("order", {"guid": "g-1"}, True)
        ob._get_single.assert_called_once_with("order", {"guid": "g-1"}, True)
        ob._get_single_slim.assert_called_once_with("order", {"guid": "g-1"}, True)
        ob._get_list.assert_called_once_with("order", {}, 3, 2, False)
        ob._get_list_slim.assert_called_once_with("order", {}, 3, 2, False)
        ob._get_list_aggregation.assert_called_once_with("order", {"guid": "g-1"}, True)
        ob._update_object.assert_called_once_with("order", {"guid": "g-1"}, True)
        ob._multiple_update.assert_called_once_with("order", {"guid": "g-1"}, True)
        ob._delete.assert_called_once_with("order", {"guid": "g-1"}, True)

    def test_flat_multiple_delete(self):
        self.client.multiple_delete(Argument("order", {"ids": ["a", "b"]}))
        self.client._objects._multiple_delete.assert_called_once_with("order", {"ids": ["a", "b"]}, False)

    def test_flat_many_to_many_methods_delegate(self):
        relation = {"table_from": "doctor", "table_to": "clinic", "id_from": "d-1", "id_to": []}
        self.client.append_many_to_many(Argument(request=relation))
        self.client.delete_many_to_many(Argument(request=relation, disable_faas=True))
        self.client._objects._append_many_to_many.assert_called_once_with(relation, False)
        self.client._objects._delete_many_to_many.assert_called_once_with(relation, True)

    def test_calls_run_inside_call_scope(self):
        self.client.get_list(Argument("order"))
        self.client._objects._call_scope.assert_called_once_with()


class TestUcodeClientEndToEnd(unittest.TestCase):
    """Drive the public API down to a patched transport."""

    def test_delete_returns_result_on_http_200(self):
        client = UcodeClient(UcodeConfig(base_url="https://api.example.com", app_id="app-123"))
        response = MagicMock(status_code=200, headers={}, text='{"status": "OK", "data": null}')
        response.json.return_value = {"status": "OK", "data": None}
        with patch("requests.request", return_value=response) as mock_request:
            result = client.delete(Argument("order", {"guid": "abc"}))

        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("delete", "https://api.example.com/v1/object/order/abc"))
        self.assertEqual(kwargs["params"], {"from-ofs": "false"})
        self.assertEqual(kwargs["headers"]["X-API-KEY"], "app-123")
        self.assertIn("X-Correlation-Id", kwargs["headers"])
        self.assertIsNone(result.value)
        self.assertIs(result.response, response)
