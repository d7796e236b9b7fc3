# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Request shaping and response decoding of the low-level object client."""

import json
from unittest.mock import patch

import pytest

from ucode_sdk.core._error_codes import (
    VALIDATION_GUID_MISSING,
    VALIDATION_IDS_INVALID,
    VALIDATION_PAGINATION_INVALID,
    VALIDATION_REQUEST_NOT_MAPPING,
    VALIDATION_TABLE_SLUG_MISSING,
)
from ucode_sdk.core.config import UcodeConfig
from ucode_sdk.core.errors import ValidationError
from ucode_sdk.core.results import OperationResult
from ucode_sdk.data._objects import _ObjectClient

BASE = "https://api.example.com"


def test_base_url_trailing_slash_trimmed():
    client = _ObjectClient(UcodeConfig(base_url="https://api.example.com/", app_id="a"))
    assert client.base_url == BASE


def test_empty_base_url_rejected():
    with pytest.raises(ValueError):
        _ObjectClient(UcodeConfig(base_url="", app_id="a"))


def test_auth_headers_attached(make_object_client, fake_response):
    c = make_object_client(fake_response(200, {"data": {}}))
    c._create_object("order", {"title": "x"})
    headers = c._http.last[2]["headers"]
    assert headers["authorization"] == "API-KEY"
    assert headers["X-API-KEY"] == "app-123"
    assert headers["Content-Type"] == "application/json"


def test_function_name_is_not_sent_as_header(make_object_client, fake_response, test_config):
    config = UcodeConfig(base_url=test_config.base_url, app_id="app-123", function_name="sync-orders")
    c = make_object_client(fake_response(200, {"data": {}}), config=config)
    c._get_list("order", {}, 10, 1, True)
    assert not any(name.lower() == "x-function-name" for name in c._http.last[2]["headers"])


def test_request_id_stamped_once_per_call(make_object_client, fake_response, sample_guid):
    c = make_object_client(fake_response(200, {"data": {}}))
    with patch.object(c, "_stamp_headers", wraps=c._stamp_headers) as stamp:
        result = c._get_single("order", {"guid": sample_guid})
    assert stamp.call_count == 1
    assert result.metadata.client_request_id == c._http.last[2]["headers"]["X-Request-Id"]


def test_create_object(make_object_client, fake_response):
    c = make_object_client(fake_response(201, {"status": "CREATED", "data": {"data": {"guid": "g-1", "title": "x"}}}))
    result = c._create_object("order", {"title": "x"})
    method, url, kwargs = c._http.last
    assert method == "post"
    assert url == f"{BASE}/v1/object/order"
    assert kwargs["json"] == {"data": {"title": "x"}}
    assert kwargs["params"] == {"from-ofs": "false"}
    assert isinstance(result, OperationResult)
    assert result.value == {"data": {"guid": "g-1", "title": "x"}}
    assert result.response.status_code == 201
    assert result.metadata.http_status_code == 201
    assert result.metadata.method == "POST"
    assert result.metadata.client_request_id == kwargs["headers"]["X-Request-Id"]


@pytest.mark.parametrize("disable_faas, expected", [(True, "true"), (False, "false")])
def test_disable_faas_sets_from_ofs(make_object_client, fake_response, disable_faas, expected):
    c = make_object_client(fake_response(200, {"data": {}}))
    c._update_object("order", {"guid": "g-1", "title": "y"}, disable_faas)
    assert c._http.last[2]["params"]["from-ofs"] == expected


def test_get_list_pagination_passthrough(make_object_client, fake_response, sample_list_body):
    c = make_object_client(fake_response(200, sample_list_body))
    result = c._get_list("order", {"status": "new"}, 20, 3, True)
    method, url, kwargs = c._http.last
    assert method == "post"
    assert url == f"{BASE}/v1/object/get-list/order"
    assert kwargs["json"] == {"data": {"status": "new", "limit": 20, "page": 3, "offset": 40}}
    assert kwargs["params"] == {"from-ofs": "true"}
    assert result["data"]["count"] == 2


def test_get_list_does_not_mutate_caller_filters(make_object_client, fake_response):
    filters = {"status": "new"}
    c = make_object_client(fake_response(200, {"data": {}}))
    c._get_list("order", filters, 5, 1)
    assert filters == {"status": "new"}


def test_get_list_slim_uses_query_string(make_object_client, fake_response):
    c = make_object_client(fake_response(200, {"data": {"response": []}}))
    c._get_list_slim("order", {"status": "new"}, 5, 2)
    method, url, kwargs = c._http.last
    assert method == "get"
    assert url == f"{BASE}/v1/object-slim/get-list/order"
    assert "json" not in kwargs
    params = kwargs["params"]
    assert json.loads(params["data"]) == {"status": "new"}
    assert params["limit"] == "5"
    assert params["page"] == "2"
    assert params["offset"] == "5"
    assert params["from-ofs"] == "false"
    assert "Content-Type" not in kwargs["headers"]


@pytest.mark.parametrize("limit, page", [(-1, 1), (10, 0), ("10", 1), (10, True)])
def test_invalid_pagination_rejected(make_object_client, limit, page):
    c = make_object_client()
    with pytest.raises(ValidationError) as ei:
        c._get_list("order", {}, limit, page)
    assert ei.value.subcode == VALIDATION_PAGINATION_INVALID
    assert c._http.calls == []


def test_get_single(make_object_client, fake_response, sample_guid):
    c = make_object_client(fake_response(200, {"data": {"data": {"response": {"guid": sample_guid}}}}))
    result = c._get_single("order", {"guid": sample_guid})
    method, url, kwargs = c._http.last
    assert method == "get"
    assert url == f"{BASE}/v1/object/order/{sample_guid}"
    assert result["data"]["response"]["guid"] == sample_guid


def test_get_single_slim(make_object_client, fake_response, sample_guid):
    c = make_object_client(fake_response(200, {"data": {}}))
    c._get_single_slim("order", {"guid": sample_guid}, True)
    method, url, kwargs = c._http.last
    assert url == f"{BASE}/v1/object-slim/order/{sample_guid}"
    assert kwargs["params"] == {"from-ofs": "true"}


def test_path_segments_are_quoted(make_object_client, fake_response):
    c = make_object_client(fake_response(200, {"data": {}}))
    c._get_single("order", {"guid": "a/b c"})
    assert c._http.last[1] == f"{BASE}/v1/object/order/a%2Fb%20c"


def test_get_list_aggregation_is_passthrough(make_object_client, fake_response):
    pipelines = [{"$match": {"status": "paid"}}, {"$group": {"_id": "$client_id", "total": {"$sum": "$amount"}}}]
    c = make_object_client(fake_response(200, {"data": {"data": {"data": [{"_id": "c1", "total": 30}]}}}))
    result = c._get_list_aggregation("order", {"pipelines": pipelines})
    method, url, kwargs = c._http.last
    assert method == "post"
    assert url == f"{BASE}/v1/object/get-list-aggregation/order"
    assert kwargs["json"] == {"data": {"pipelines": pipelines}}
    assert result["data"]["data"][0]["total"] == 30


def test_update_object(make_object_client, fake_response, sample_guid):
    c = make_object_client(fake_response(200, {"data": {"guid": sample_guid}}))
    c._update_object("order", {"guid": sample_guid, "title": "new"})
    method, url, kwargs = c._http.last
    assert method == "put"
    assert url == f"{BASE}/v1/object/order"
    assert kwargs["json"] == {"data": {"guid": sample_guid, "title": "new"}}


def test_multiple_update(make_object_client, fake_response):
    objects = [{"guid": "g-1", "status": "shipped"}, {"guid": "g-2", "status": "shipped"}]
    c = make_object_client(fake_response(200, {"data": {}}))
    c._multiple_update("order", {"objects": objects})
    method, url, kwargs = c._http.last
    assert method == "put"
    assert url == f"{BASE}/v1/object/multiple-update/order"
    assert kwargs["json"] == {"data": {"objects": objects}}


def test_delete_targets_guid_endpoint(make_object_client, fake_response):
    c = make_object_client(fake_response(200, {"status": "OK", "data": None}))
    result = c._delete("order", {"guid": "abc"})
    method, url, kwargs = c._http.last
    assert method == "delete"
    assert url == f"{BASE}/v1/object/order/abc"
    assert kwargs["json"] == {}
    assert result.value is None
    assert result.response.status_code == 200


def test_delete_with_empty_body(make_object_client, fake_response):
    c = make_object_client(fake_response(204))
    result = c._delete("order", {"guid": "abc"})
    assert result.value is None
    assert result.metadata.http_status_code == 204


def test_multiple_delete(make_object_client, fake_response):
    c = make_object_client(fake_response(200, {"data": {}}))
    c._multiple_delete("order", {"ids": ["g-1", "g-2"]}, True)
    method, url, kwargs = c._http.last
    assert method == "delete"
    assert url == f"{BASE}/v1/object/order"
    assert kwargs["json"] == {"ids": ["g-1", "g-2"]}
    assert kwargs["params"] == {"from-ofs": "true"}


@pytest.mark.parametrize("data", [{}, {"ids": "g-1"}, {"ids": ["g-1", ""]}, {"ids": [1, 2]}])
def test_multiple_delete_rejects_bad_ids(make_object_client, data):
    c = make_object_client()
    with pytest.raises(ValidationError) as ei:
        c._multiple_delete("order", data)
    assert ei.value.subcode == VALIDATION_IDS_INVALID
    assert c._http.calls == []


@pytest.mark.parametrize("slug", ["", "   ", None])
def test_missing_table_slug_rejected(make_object_client, slug):
    c = make_object_client()
    with pytest.raises(ValidationError) as ei:
        c._create_object(slug, {"title": "x"})
    assert ei.value.subcode == VALIDATION_TABLE_SLUG_MISSING
    assert c._http.calls == []


@pytest.mark.parametrize("op", ["_get_single", "_get_single_slim", "_delete"])
def test_guid_required(make_object_client, op):
    c = make_object_client()
    with pytest.raises(ValidationError) as ei:
        getattr(c, op)("order", {"title": "no guid"})
    assert ei.value.subcode == VALIDATION_GUID_MISSING
    assert c._http.calls == []


def test_request_data_must_be_mapping(make_object_client):
    c = make_object_client()
    with pytest.raises(ValidationError) as ei:
        c._create_object("order", ["not", "a", "mapping"])
    assert ei.value.subcode == VALIDATION_REQUEST_NOT_MAPPING


def test_body_without_envelope_returned_whole(make_object_client, fake_response):
    c = make_object_client(fake_response(200, [{"guid": "g-1"}]))
    result = c._get_list_slim("order", {}, 10, 1)
    assert result.value == [{"guid": "g-1"}]
