# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""API key models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .common import StatusEnvelope, _require_mapping, _str_or_empty


@dataclass
class ApiKey:
    """
    An API key registered on the account.

    :param id: Key id.
    :type id: str
    :param name: Display name.
    :type name: str
    :param write: ``"1"`` for read-write keys, ``"0"`` for read-only keys.
    :type write: str
    :param created_at: Creation timestamp as reported by the API.
    :type created_at: str
    """

    id: str
    name: str = ""
    write: str = ""
    created_at: str = ""

    @property
    def can_write(self) -> bool:
        return self.write == "1"

    @classmethod
    def from_api_response(cls, data: Any) -> "ApiKey":
        data = _require_mapping(data, "api key")
        return cls(
            id=_str_or_empty(data.get("id")),
            name=_str_or_empty(data.get("name")),
            write=_str_or_empty(data.get("write")),
            created_at=_str_or_empty(data.get("created_at")),
        )


@dataclass
class ApiKeyList(StatusEnvelope):
    api: List[ApiKey] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any) -> "ApiKeyList":
        data = _require_mapping(data, "api key list")
        return cls(
            api=[ApiKey.from_api_response(item) for item in data.get("api") or []],
            **cls._envelope_kwargs(data),
        )


@dataclass
class CreateApiKeyParams:
    """
    Payload for generating an API key.

    :param name: Display name for the new key.
    :type name: str
    :param write: ``"1"`` to allow write operations, ``"0"`` for read-only.
    :type write: str
    """

    name: str
    write: str = "0"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "write": self.write}


@dataclass
class CreateApiKeyResponse(StatusEnvelope):
    """Result of ``api/generate``; ``apikey`` is only returned once."""

    apikey: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "CreateApiKeyResponse":
        data = _require_mapping(data, "create api key")
        return cls(apikey=_str_or_empty(data.get("apikey")), **cls._envelope_kwargs(data))
