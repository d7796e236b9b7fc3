# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import Mock

from ucode_sdk.core.results import OperationResult, RequestMetadata, UcodeResponse


class TestOperationResult(unittest.TestCase):
    """OperationResult behaves like its value and keeps response details."""

    def setUp(self):
        self.metadata = RequestMetadata(
            client_request_id="req-1",
            correlation_id="corr-1",
            method="POST",
            url="https://api.example.com/v1/object/order",
            http_status_code=201,
            timing_ms=12.5,
        )
        self.response = Mock(status_code=201)

    def test_dict_value_access(self):
        result = OperationResult({"data": {"guid": "g-1"}}, self.metadata, self.response)
        self.assertEqual(result["data"]["guid"], "g-1")
        self.assertEqual(result.get("data"), {"guid": "g-1"})
        self.assertIsNone(result.get("missing"))
        self.assertIn("data", result)
        self.assertEqual(len(result), 1)
        self.assertTrue(result)

    def test_list_value_iteration(self):
        result = OperationResult(["a", "b"], self.metadata)
        self.assertEqual(list(result), ["a", "b"])
        self.assertEqual(result[1], "b")
        self.assertEqual(len(result), 2)

    def test_none_value(self):
        result = OperationResult(None, self.metadata, self.response)
        self.assertFalse(result)
        self.assertEqual(len(result), 0)
        self.assertEqual(list(result), [])
        self.assertIsNone(result.value)
        self.assertIsNone(result.get("anything"))

    def test_equality_with_raw_value_and_other_result(self):
        self.assertEqual(OperationResult({"a": 1}), {"a": 1})
        self.assertEqual(OperationResult({"a": 1}), OperationResult({"a": 1}))
        self.assertNotEqual(OperationResult({"a": 1}), {"a": 2})

    def test_response_and_metadata_exposed(self):
        result = OperationResult({"a": 1}, self.metadata, self.response)
        self.assertIs(result.response, self.response)
        self.assertIs(result.metadata, self.metadata)

    def test_default_metadata(self):
        result = OperationResult("x")
        self.assertEqual(result.metadata, RequestMetadata())
        self.assertIsNone(result.response)

    def test_with_response_details(self):
        result = OperationResult({"a": 1}, self.metadata, self.response)
        details = result.with_response_details()
        self.assertIsInstance(details, UcodeResponse)
        self.assertEqual(details.result, {"a": 1})
        self.assertIs(details.response, self.response)
        self.assertEqual(
            details.telemetry,
            {
                "client_request_id": "req-1",
                "correlation_id": "corr-1",
                "method": "POST",
                "url": "https://api.example.com/v1/object/order",
                "http_status_code": 201,
                "timing_ms": 12.5,
            },
        )

    def test_repr_and_str(self):
        result = OperationResult({"a": 1})
        self.assertEqual(str(result), "{'a': 1}")
        self.assertEqual(repr(result), "OperationResult({'a': 1})")
