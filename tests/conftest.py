# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for UCode SDK tests.

This module provides fake HTTP responses, a recording transport and common
configuration that can be used across all test modules.
"""

import json

import pytest

from ucode_sdk.core.config import UcodeConfig
from ucode_sdk.data._objects import _ObjectClient


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code=200, body=None, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self._body = body
        if body is None:
            self.text = ""
        elif isinstance(body, (dict, list)):
            self.text = json.dumps(body)
        else:
            self.text = body

    def json(self):
        if isinstance(self._body, (dict, list)):
            return self._body
        raise ValueError("non-json")


class RecordingHTTP:
    """Replays canned responses and records every outgoing request."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more responses")
        return self._responses.pop(0)

    def close(self):
        pass

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return UcodeConfig(
        base_url="https://api.example.com",
        app_id="app-123",
        request_timeout=5,
        base_auth_url="https://auth.example.com",
        project_id="project-1",
        environment_id="env-1",
    )


@pytest.fixture
def make_object_client(test_config):
    """Factory building an _ObjectClient whose transport replays the given responses."""

    def factory(*responses, config=None):
        client = _ObjectClient(config or test_config)
        client._http = RecordingHTTP(responses)
        return client

    return factory


@pytest.fixture
def sample_guid():
    """Sample GUID for testing."""
    return "11111111-2222-3333-4444-555555555555"


@pytest.fixture
def sample_list_body():
    """Envelope returned by the get-list endpoint."""
    return {
        "status": "OK",
        "description": "",
        "data": {
            "table_slug": "order",
            "data": {
                "count": 2,
                "response": [
                    {"guid": "g-1", "title": "First", "amount": 10},
                    {"guid": "g-2", "title": "Second", "amount": 20},
                ],
            },
        },
    }


@pytest.fixture
def fake_response():
    """The FakeResponse class, for building canned responses."""
    return FakeResponse
