# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Status envelope shared by every Utho response body.

Many Utho endpoints answer HTTP 200 even for failed operations and report the
failure through an embedded ``status`` field instead. Every response model
extends :class:`StatusEnvelope` so callers can check that second channel with
:meth:`StatusEnvelope.raise_for_api_status`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..core._error_codes import API_STATUS_FAILED
from ..core.errors import ApiError

SUCCESS_STATUS = "success"


def _require_mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{kind} response must be a JSON object, got {type(data).__name__}")
    return data


def _str_or_empty(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass
class StatusEnvelope:
    """
    Embedded ``{"status": ..., "message": ...}`` pair.

    :param status: ``"success"``, another provider status, or empty when absent.
    :type status: str
    :param message: Provider message accompanying the status.
    :type message: str
    """

    status: str = ""
    message: str = ""

    @property
    def is_failure(self) -> bool:
        """True only for an explicit status other than ``"success"``."""
        return bool(self.status) and self.status != SUCCESS_STATUS

    def raise_for_api_status(self) -> None:
        """
        Raise :class:`~utho.core.errors.ApiError` when the embedded status flags a failure.

        An absent (empty) status counts as success.

        :raises ApiError: If :attr:`is_failure` is true; carries :attr:`message`.
        """
        if self.is_failure:
            raise ApiError(self.message, api_status=self.status, subcode=API_STATUS_FAILED)

    @staticmethod
    def _envelope_kwargs(data: Mapping[str, Any]) -> Dict[str, str]:
        return {
            "status": _str_or_empty(data.get("status")),
            "message": _str_or_empty(data.get("message")),
        }


@dataclass
class BasicResponse(StatusEnvelope):
    """Bare status envelope returned by action endpoints (reboot, backups, ...)."""

    @classmethod
    def from_api_response(cls, data: Any) -> "BasicResponse":
        data = _require_mapping(data, "basic")
        return cls(**cls._envelope_kwargs(data))


@dataclass
class CreateBasicResponse(StatusEnvelope):
    """Status envelope plus the id of the created resource."""

    id: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "CreateBasicResponse":
        data = _require_mapping(data, "create")
        return cls(id=_str_or_empty(data.get("id")), **cls._envelope_kwargs(data))


@dataclass
class DeleteResponse(StatusEnvelope):
    """Status envelope returned by delete endpoints."""

    @classmethod
    def from_api_response(cls, data: Any) -> "DeleteResponse":
        data = _require_mapping(data, "delete")
        return cls(**cls._envelope_kwargs(data))


@dataclass
class ErrorEnvelope(StatusEnvelope):
    """Best-effort decode of a non-2xx/3xx response body."""

    @classmethod
    def from_body(cls, data: Optional[Any]) -> "ErrorEnvelope":
        if not isinstance(data, Mapping):
            return cls()
        return cls(**cls._envelope_kwargs(data))
