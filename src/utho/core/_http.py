# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP dispatch with timeout handling and optional session support.

This module provides :class:`~utho.core._http._HttpClient`, a thin wrapper
around the requests library that applies a bounded timeout, optionally reuses
a :class:`requests.Session` for connection pooling, and always releases the
response before handing its contents back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from requests.structures import CaseInsensitiveDict

from .errors import TransportError

DEFAULT_TIMEOUT = 300.0


@dataclass(frozen=True)
class _RawResponse:
    """Status, headers and body of a completed HTTP exchange."""

    status_code: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    content: bytes = b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class _HttpClient:
    """
    HTTP client with timeout handling and optional session support.

    No retries are attempted: a failed exchange is reported once as
    :class:`~utho.core.errors.TransportError`.

    :param timeout: Request timeout in seconds. Default is 300.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection pooling. If provided,
        all requests use this session for efficient connection reuse.
    :type session: :class:`requests.Session` | None
    :param owns_session: Whether :meth:`close` should close ``session``.
    :type owns_session: :class:`bool`
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        owns_session: bool = False,
    ) -> None:
        self.default_timeout: float = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._session = session
        self._owns_session = owns_session and session is not None

    def _use_session(self, session: requests.Session, *, owned: bool) -> None:
        """Route subsequent requests through ``session``."""
        self._session = session
        self._owns_session = owned

    def _request(self, method: str, url: str, **kwargs: Any) -> _RawResponse:
        """
        Execute an HTTP request and return its fully read response.

        :param method: HTTP method (GET, POST, PUT, DELETE, etc.).
        :type method: :class:`str`
        :param url: Absolute target URL.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers and data.
        :return: Status code, headers and body of the response.
        :rtype: :class:`~utho.core._http._RawResponse`
        :raises TransportError: On connection failures, timeouts, DNS errors or
            an interrupted body read.
        """
        kwargs.setdefault("timeout", self.default_timeout)
        try:
            if self._session is not None:
                response = self._session.request(method, url, **kwargs)
            else:
                response = requests.request(method, url, **kwargs)
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"{method} {url} failed: {exc}",
                details={"exception": type(exc).__name__},
            ) from exc

        try:
            content = response.content or b""
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"{method} {url} failed while reading the response body: {exc}",
                details={"exception": type(exc).__name__},
            ) from exc
        finally:
            response.close()

        return _RawResponse(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers or {}),
            content=content,
        )

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        Closes the session only when this client owns it; a caller-supplied
        session stays open. Safe to call multiple times.
        """
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False
