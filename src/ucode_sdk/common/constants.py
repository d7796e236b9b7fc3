# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the UCode platform HTTP API.

These constants define the endpoint templates, header names and query
parameter names used when building requests.
"""

DEFAULT_BASE_URL = "https://api.admin.u-code.io"
DEFAULT_AUTH_URL = "https://api.auth.u-code.io"
DEFAULT_FOLDER_NAME = "Media"

# Object endpoints, relative to the configured base URL
OBJECT_PATH = "/v1/object/{table_slug}"
OBJECT_GUID_PATH = "/v1/object/{table_slug}/{guid}"
OBJECT_GET_LIST_PATH = "/v1/object/get-list/{table_slug}"
OBJECT_AGGREGATION_PATH = "/v1/object/get-list-aggregation/{table_slug}"
OBJECT_MULTIPLE_UPDATE_PATH = "/v1/object/multiple-update/{table_slug}"
OBJECT_SLIM_GET_LIST_PATH = "/v1/object-slim/get-list/{table_slug}"
OBJECT_SLIM_GUID_PATH = "/v1/object-slim/{table_slug}/{guid}"
MANY_TO_MANY_PATH = "/v1/many-to-many"

# File and function endpoints, relative to the configured base URL
FILE_UPLOAD_PATH = "/v1/files/folder_upload"
FILE_PATH = "/v1/files/{file_id}"
INVOKE_FUNCTION_PATH = "/v1/invoke_function/{function_path}"

# Auth endpoints, relative to the configured auth URL
AUTH_REGISTER_PATH = "/v2/register"
AUTH_LOGIN_PATH = "/v2/login"
AUTH_SEND_CODE_PATH = "/v2/send-code"
AUTH_RESET_PASSWORD_PATH = "/v2/reset-password"

# Query parameters
PARAM_FROM_OFS = "from-ofs"
"""Set to ``true`` to tell the platform the request must not run serverless triggers."""
PARAM_PROJECT_ID = "project-id"
PARAM_FOLDER_NAME = "folder_name"

# Headers
HEADER_AUTHORIZATION = "authorization"
HEADER_API_KEY = "X-API-KEY"
HEADER_REQUEST_ID = "X-Request-Id"
HEADER_CORRELATION_ID = "X-Correlation-Id"
HEADER_RESOURCE_ID = "Resource-Id"
HEADER_ENVIRONMENT_ID = "Environment-Id"
AUTHORIZATION_API_KEY = "API-KEY"

# Response envelope keys
ENVELOPE_STATUS = "status"
ENVELOPE_DESCRIPTION = "description"
ENVELOPE_DATA = "data"
ENVELOPE_ERROR = "error"
