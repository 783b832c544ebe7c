# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""API key operations namespace."""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..models.api_key import ApiKey, ApiKeyList, CreateApiKeyParams, CreateApiKeyResponse
from ..models.common import DeleteResponse

if TYPE_CHECKING:
    from ..data._api import _ApiClient


class ApiKeyOperations:
    """
    API key management.

    Accessed via ``client.api_keys``.

    Example::

        created = client.api_keys.create(CreateApiKeyParams(name="ci", write="1"))
        for key in client.api_keys.list():
            print(key.id, key.name)
        client.api_keys.delete(key.id)
    """

    def __init__(self, api: "_ApiClient") -> None:
        self._api = api

    def create(self, params: CreateApiKeyParams) -> CreateApiKeyResponse:
        """
        Generate a new API key.

        :param params: Name and write permission of the key.
        :type params: ~utho.models.api_key.CreateApiKeyParams
        :return: The generated key. ``apikey`` is only ever returned here.
        :rtype: ~utho.models.api_key.CreateApiKeyResponse
        """
        created = self._api._call("POST", "api/generate", CreateApiKeyResponse, params, operation="api_keys.create")
        created.raise_for_api_status()
        return created

    def list(self) -> List[ApiKey]:
        """
        List the account's API keys.

        :return: Registered keys, without their secret values.
        :rtype: list[~utho.models.api_key.ApiKey]
        """
        keys = self._api._call("GET", "api", ApiKeyList, operation="api_keys.list")
        keys.raise_for_api_status()
        return keys.api

    def delete(self, api_key_id: str) -> DeleteResponse:
        """Delete the API key ``api_key_id``."""
        deleted = self._api._call("DELETE", f"api/{api_key_id}/delete", DeleteResponse, operation="api_keys.delete")
        deleted.raise_for_api_status()
        return deleted
