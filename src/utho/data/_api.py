# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level Utho API client shared by every resource namespace.

Builds requests against the configured base endpoint, attaches the bearer
credential at send time, and classifies and decodes responses.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, TypeVar

import requests

from ..__version__ import __version__
from ..core._auth import _AuthManager
from ..core._error_codes import (
    DECODE_INVALID_JSON,
    DECODE_UNEXPECTED_SHAPE,
    REQUEST_INVALID_METHOD,
    _http_subcode,
)
from ..core._http import _HttpClient, _RawResponse
from ..core._urls import _resolve
from ..core.config import UthoConfig
from ..core.errors import ApiError, DecodeError, InvalidRequestError, SerializationError
from ..core.telemetry import create_telemetry_manager
from ..models.common import ErrorEnvelope

T = TypeVar("T")

# RFC 7230 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

_BODY_EXCERPT_LIMIT = 200


@dataclass
class _Request:
    """
    A fully resolved request, built fresh for every call.

    ``headers`` never contains ``Authorization``; the credential is attached
    when the request is sent.
    """

    method: str
    url: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


class _ApiClient:
    """Utho Web API transport: request building, authenticated dispatch and decoding."""

    def __init__(
        self,
        auth: _AuthManager,
        config: UthoConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        self.config = config
        # Already normalized with a trailing slash by the client settings
        self.base_url = config.base_url
        self._http = _HttpClient(timeout=config.http_timeout, session=session)
        self._telemetry = create_telemetry_manager(config.telemetry)

    def _headers(self) -> Dict[str, str]:
        """Fixed headers for every request; authentication is added in :meth:`_do`."""
        return {
            "Content-Type": "application/json",
            "Accept-Encoding": "application/json",
            "User-Agent": f"utho-python/{__version__}",
        }

    def _new_request(self, method: str, path: str, payload: Any = None) -> _Request:
        """
        Build a request for ``path`` relative to the base endpoint.

        :param method: HTTP method, e.g. ``"GET"``.
        :type method: :class:`str`
        :param path: Relative resource path without a leading slash, e.g. ``"cloud/123"``.
        :type path: :class:`str`
        :param payload: Optional JSON body. Objects exposing ``to_dict()`` are converted first.
        :return: The request descriptor.
        :rtype: ~utho.data._api._Request
        :raises InvalidRequestError: If ``method`` is not an HTTP token or ``path`` is absolute.
        :raises SerializationError: If ``payload`` cannot be encoded as JSON.
        """
        if not isinstance(method, str) or not _METHOD_RE.fullmatch(method):
            raise InvalidRequestError(f"invalid HTTP method: {method!r}", subcode=REQUEST_INVALID_METHOD)
        url = _resolve(self.base_url, path)

        body: Optional[bytes] = None
        if payload is not None:
            if hasattr(payload, "to_dict"):
                payload = payload.to_dict()
            try:
                # json never HTML-escapes, so <, > and & are sent verbatim
                body = json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise SerializationError(
                    f"request payload for {method.upper()} {path} is not JSON-serializable: {exc}",
                    details={"payload_type": type(payload).__name__},
                ) from exc

        return _Request(method=method.upper(), url=url, body=body, headers=self._headers())

    def _do(
        self,
        request: _Request,
        target: Optional[Type[T]] = None,
        *,
        operation: Optional[str] = None,
    ) -> Optional[T]:
        """
        Send ``request`` and decode the response into ``target``.

        :param request: Descriptor built by :meth:`_new_request`.
        :type request: ~utho.data._api._Request
        :param target: Class exposing ``from_api_response(data)``. When ``None``
            the body is not decoded and ``None`` is returned.
        :param operation: Operation name reported to telemetry, e.g. ``"api_keys.list"``.
        :type operation: :class:`str` | None
        :return: The decoded target instance, or ``None`` without a target.
        :raises TransportError: If the HTTP exchange itself fails.
        :raises ApiError: If the status code is outside ``[200, 400)``.
        :raises DecodeError: If the body does not decode into ``target``.
        """
        headers = dict(request.headers)
        headers["Authorization"] = self.auth._authorization_header()

        with self._telemetry.trace_request(request.method, request.url, operation) as ctx:
            raw = self._http._request(request.method, request.url, headers=headers, data=request.body)
            self._telemetry.record_response(ctx, raw.status_code, response_size=len(raw.content))

        self._check_for_errors(raw)

        if target is None:
            return None
        return self._decode(raw, target)

    def _call(
        self,
        method: str,
        path: str,
        target: Optional[Type[T]] = None,
        payload: Any = None,
        *,
        operation: Optional[str] = None,
    ) -> Optional[T]:
        """Build and send a request in one step."""
        return self._do(self._new_request(method, path, payload), target, operation=operation)

    @staticmethod
    def _check_for_errors(raw: _RawResponse) -> None:
        """
        Raise :class:`ApiError` for any status outside ``[200, 400)``.

        The body is decoded on a best-effort basis; a body that is empty or
        not a JSON object leaves the provider status and message empty.
        """
        if 200 <= raw.status_code < 400:
            return

        data: Any = None
        if raw.content:
            try:
                data = json.loads(raw.content)
            except (ValueError, RecursionError):
                data = None
        envelope = ErrorEnvelope.from_body(data)
        raise ApiError(
            envelope.message,
            status_code=raw.status_code,
            headers=raw.headers,
            api_status=envelope.status,
            subcode=_http_subcode(raw.status_code),
            body_excerpt=raw.text[:_BODY_EXCERPT_LIMIT] if raw.content else None,
        )

    @staticmethod
    def _decode(raw: _RawResponse, target: Type[T]) -> T:
        """Decode a structurally successful body; an empty body yields the target's empty value."""
        if not raw.content.strip():
            data: Any = {}
        else:
            try:
                data = json.loads(raw.content)
            except (ValueError, RecursionError) as exc:
                raise DecodeError(
                    f"response body is not valid JSON: {exc}",
                    subcode=DECODE_INVALID_JSON,
                    status_code=raw.status_code,
                    details={"body_excerpt": raw.text[:_BODY_EXCERPT_LIMIT]},
                ) from exc
        try:
            return target.from_api_response(data)  # type: ignore[attr-defined]
        except (TypeError, ValueError) as exc:
            raise DecodeError(
                f"response body does not match {target.__name__}: {exc}",
                subcode=DECODE_UNEXPECTED_SHAPE,
                status_code=raw.status_code,
            ) from exc

    def close(self) -> None:
        """Release the underlying HTTP resources."""
        self._http.close()
