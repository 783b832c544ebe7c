# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Bearer credential handling for the Utho SDK.

The key is read each time a request is sent, so rotating it with
:meth:`azure.core.credentials.AzureKeyCredential.update` takes effect on the
next call without rebuilding the client.
"""

from __future__ import annotations

from typing import Union

from azure.core.credentials import AzureKeyCredential

from .errors import MissingCredentialError


class _AuthManager:
    """Holds the API key credential used for every authenticated request."""

    def __init__(self, credential: Union[str, AzureKeyCredential, None]) -> None:
        if isinstance(credential, AzureKeyCredential):
            if not credential.key:
                raise MissingCredentialError()
            self.credential = credential
        elif isinstance(credential, str):
            if not credential:
                raise MissingCredentialError()
            self.credential = AzureKeyCredential(credential)
        elif credential is None:
            raise MissingCredentialError()
        else:
            raise TypeError("credential must be a str or azure.core.credentials.AzureKeyCredential.")

    def _authorization_header(self) -> str:
        """Return the ``Authorization`` header value for the current key."""
        return f"Bearer {self.credential.key}"
