# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ._error_codes import CONFIG_INVALID_TIMEOUT
from .errors import InvalidConfigurationError
from .telemetry import TelemetryConfig

BASE_URL = "https://api.utho.com/v2/"


@dataclass(frozen=True)
class UthoConfig:
    """
    Configuration settings for Utho client operations.

    :param base_url: API endpoint all relative resource paths resolve against.
        A trailing slash is added when missing. Default is ``https://api.utho.com/v2/``.
    :type base_url: str
    :param http_timeout: Request timeout in seconds (default: 300).
    :type http_timeout: float or None
    :param telemetry: Optional logging and hook configuration.
    :type telemetry: ~utho.core.telemetry.TelemetryConfig or None
    """
    base_url: str = BASE_URL
    http_timeout: Optional[float] = None
    telemetry: Optional[TelemetryConfig] = None

    @classmethod
    def from_env(cls) -> "UthoConfig":
        """
        Create a configuration instance, honouring ``UTHO_BASE_URL`` and
        ``UTHO_HTTP_TIMEOUT`` when they are set.

        :return: Configuration instance.
        :rtype: ~utho.core.config.UthoConfig
        :raises InvalidConfigurationError: If ``UTHO_HTTP_TIMEOUT`` is not a number.
        """
        timeout_raw = os.environ.get("UTHO_HTTP_TIMEOUT")
        timeout: Optional[float] = None
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError as exc:
                raise InvalidConfigurationError(
                    f"UTHO_HTTP_TIMEOUT must be a number of seconds, got {timeout_raw!r}",
                    subcode=CONFIG_INVALID_TIMEOUT,
                ) from exc
        return cls(
            base_url=os.environ.get("UTHO_BASE_URL") or BASE_URL,
            http_timeout=timeout,  # Will default to 300 in _HttpClient
            telemetry=None,
        )
