# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Python SDK for the Utho cloud API.

Example::

    from utho import UthoClient

    with UthoClient("my-token") as client:
        for instance in client.cloud_instances.list():
            print(instance.hostname, instance.ip)
"""

from .__version__ import __version__
from .client import UthoClient
from .core.config import UthoConfig
from .core.errors import (
    ApiError,
    DecodeError,
    InvalidConfigurationError,
    InvalidRequestError,
    MissingCredentialError,
    SerializationError,
    TransportError,
    UthoError,
)
from .core.options import with_base_url, with_session, with_telemetry, with_timeout

__all__ = [
    "__version__",
    "UthoClient",
    "UthoConfig",
    "UthoError",
    "ApiError",
    "DecodeError",
    "InvalidConfigurationError",
    "InvalidRequestError",
    "MissingCredentialError",
    "SerializationError",
    "TransportError",
    "with_base_url",
    "with_session",
    "with_telemetry",
    "with_timeout",
]
