# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Subcode constants attached to :class:`~ucode_sdk.core.errors.UcodeError` instances."""

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_409 = "http_409"
HTTP_422 = "http_422"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

_HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    409: HTTP_409,
    422: HTTP_422,
    429: HTTP_429,
    500: HTTP_500,
    502: HTTP_502,
    503: HTTP_503,
    504: HTTP_504,
}

TRANSIENT_STATUS = {429, 502, 503, 504}

# Validation subcodes
VALIDATION_TABLE_SLUG_MISSING = "validation_table_slug_missing"
VALIDATION_GUID_MISSING = "validation_guid_missing"
VALIDATION_IDS_INVALID = "validation_ids_invalid"
VALIDATION_RELATION_FIELD_MISSING = "validation_relation_field_missing"
VALIDATION_PAGINATION_INVALID = "validation_pagination_invalid"
VALIDATION_FUNCTION_PATH_MISSING = "validation_function_path_missing"
VALIDATION_REQUEST_NOT_MAPPING = "validation_request_not_mapping"

# Deserialization subcodes
DESERIALIZATION_INVALID_JSON = "deserialization_invalid_json"


def _http_subcode(status: int) -> str:
    return _HTTP_STATUS_TO_SUBCODE.get(status, f"http_{status}")


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS
