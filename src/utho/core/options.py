# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Construction-time options for :class:`~utho.client.UthoClient`.

An option is a callable that receives the mutable client settings and adjusts
them. Options run in the order given; the first one to raise aborts client
construction with its error.

Example::

    client = UthoClient(
        token,
        with_base_url("https://staging.api.utho.com/v2"),
        with_timeout(30),
    )
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from ._error_codes import CONFIG_INVALID_SESSION, CONFIG_INVALID_TIMEOUT
from ._urls import _ensure_trailing_slash
from .config import UthoConfig
from .errors import InvalidConfigurationError
from .telemetry import TelemetryConfig


def _check_timeout(seconds: Any) -> float:
    """Return ``seconds`` as a float, or raise if it is not a positive finite number."""
    if (
        isinstance(seconds, bool)
        or not isinstance(seconds, (int, float))
        or not math.isfinite(seconds)
        or seconds <= 0
    ):
        raise InvalidConfigurationError(
            f"timeout must be a positive number of seconds, got {seconds!r}",
            subcode=CONFIG_INVALID_TIMEOUT,
        )
    return float(seconds)


@dataclass
class _ClientSettings:
    """Mutable settings that options act on before the client is assembled."""

    base_url: str
    timeout: Optional[float] = None
    session: Optional[requests.Session] = None
    telemetry: Optional[TelemetryConfig] = None

    @classmethod
    def from_config(cls, config: UthoConfig) -> "_ClientSettings":
        return cls(
            base_url=config.base_url,
            timeout=config.http_timeout,
            telemetry=config.telemetry,
        )

    def to_config(self) -> UthoConfig:
        return UthoConfig(
            base_url=_ensure_trailing_slash(self.base_url),
            http_timeout=_check_timeout(self.timeout) if self.timeout is not None else None,
            telemetry=self.telemetry,
        )


ClientOption = Callable[[_ClientSettings], None]


def with_base_url(url: str) -> ClientOption:
    """Send requests to ``url`` instead of the public Utho endpoint."""

    def _apply(settings: _ClientSettings) -> None:
        settings.base_url = _ensure_trailing_slash(url)

    return _apply


def with_session(session: requests.Session) -> ClientOption:
    """
    Dispatch requests through a caller-owned :class:`requests.Session`.

    The client never closes a session supplied this way.
    """

    def _apply(settings: _ClientSettings) -> None:
        if not isinstance(session, requests.Session):
            raise InvalidConfigurationError(
                "session must be a requests.Session", subcode=CONFIG_INVALID_SESSION
            )
        settings.session = session

    return _apply


def with_timeout(seconds: float) -> ClientOption:
    """Override the per-request timeout (default 300 seconds)."""

    def _apply(settings: _ClientSettings) -> None:
        settings.timeout = _check_timeout(seconds)

    return _apply


def with_telemetry(telemetry: TelemetryConfig) -> ClientOption:
    """Enable request logging and hooks."""

    def _apply(settings: _ClientSettings) -> None:
        settings.telemetry = telemetry

    return _apply


__all__ = [
    "ClientOption",
    "with_base_url",
    "with_session",
    "with_timeout",
    "with_telemetry",
]
