# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Embedded "status" flag reported failure on a 2xx/3xx response
API_STATUS_FAILED = "api_status_failed"
# Successful envelope that did not contain the requested resource
API_RESOURCE_NOT_FOUND = "api_resource_not_found"

# Configuration subcodes
CONFIG_MISSING_CREDENTIAL = "config_missing_credential"
CONFIG_INVALID_BASE_URL = "config_invalid_base_url"
CONFIG_INVALID_TIMEOUT = "config_invalid_timeout"
CONFIG_INVALID_SESSION = "config_invalid_session"

# Request subcodes
REQUEST_INVALID_METHOD = "request_invalid_method"
REQUEST_ABSOLUTE_PATH = "request_absolute_path"

# Decode subcodes
DECODE_INVALID_JSON = "decode_invalid_json"
DECODE_UNEXPECTED_SHAPE = "decode_unexpected_shape"


def _http_subcode(status: int) -> str:
    return f"http_{status}"
