# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Utho SDK.

This module contains the foundational components including configuration,
construction options, error handling and telemetry.
"""

from .config import UthoConfig
from .errors import (
    UthoError,
    ApiError,
    DecodeError,
    InvalidConfigurationError,
    InvalidRequestError,
    MissingCredentialError,
    SerializationError,
    TransportError,
)
from .telemetry import TelemetryConfig, TelemetryHook

__all__ = [
    "UthoConfig",
    "UthoError",
    "ApiError",
    "DecodeError",
    "InvalidConfigurationError",
    "InvalidRequestError",
    "MissingCredentialError",
    "SerializationError",
    "TransportError",
    "TelemetryConfig",
    "TelemetryHook",
]
