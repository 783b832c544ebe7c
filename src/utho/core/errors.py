# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the Utho SDK.

Every failure surfaces as a subclass of :class:`UthoError`. Nothing in the SDK
retries or recovers locally; each error is the terminal outcome of the call
that raised it.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict

from ._error_codes import CONFIG_MISSING_CREDENTIAL


class UthoError(Exception):
    """Base structured error for the Utho SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = dict(details or {})
        self.source = source or "client"
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class InvalidConfigurationError(UthoError):
    """Malformed base URL, bad option value or missing credential at construction."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="invalid_configuration", subcode=subcode, details=details, source="client")


class MissingCredentialError(InvalidConfigurationError):
    def __init__(self, message: str = "you must provide an API token"):
        super().__init__(message, subcode=CONFIG_MISSING_CREDENTIAL)


class InvalidRequestError(UthoError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="invalid_request", subcode=subcode, details=details, source="client")


class SerializationError(UthoError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="serialization_error", details=details, source="client")


class TransportError(UthoError):
    """Network-level failure: connection refused, timeout, DNS resolution."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="transport_error", details=details, source="network")


class DecodeError(UthoError):
    """Response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            code="decode_error",
            subcode=subcode,
            status_code=status_code,
            details=details,
            source="client",
        )


class ApiError(UthoError):
    """
    Failure reported by the Utho API.

    Raised either for an HTTP status outside ``[200, 400)`` or for a
    structurally successful response whose embedded ``status`` flag is not
    ``"success"``.

    :param message: Provider-supplied message, empty when the body carried none.
    :type message: :class:`str`
    :param status_code: HTTP status of the response, when known.
    :type status_code: :class:`int` | None
    :param headers: Response headers of the failed call.
    :type headers: :class:`~collections.abc.Mapping` | None
    :param api_status: Value of the embedded ``status`` field, empty when absent.
    :type api_status: :class:`str`
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
        api_status: str = "",
        subcode: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = dict(details or {})
        if api_status:
            d["api_status"] = api_status
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code="api_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
        )
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict(headers or {})
        self.api_status = api_status

    def __str__(self) -> str:
        if self.message:
            return self.message
        if self.status_code is not None:
            return f"Utho API request failed with HTTP {self.status_code}"
        return "Utho API request failed"


__all__ = [
    "UthoError",
    "InvalidConfigurationError",
    "MissingCredentialError",
    "InvalidRequestError",
    "SerializationError",
    "TransportError",
    "DecodeError",
    "ApiError",
]
