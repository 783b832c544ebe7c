# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from typing import Optional, Union

import requests

from azure.core.credentials import AzureKeyCredential

from .core._auth import _AuthManager
from .core.config import UthoConfig
from .core.options import ClientOption, _ClientSettings
from .data._api import _ApiClient
from .operations.account import AccountOperations
from .operations.api_keys import ApiKeyOperations
from .operations.cloud_instances import CloudInstanceOperations


class UthoClient:
    """
    High-level client for the Utho cloud API.

    Every resource namespace shares one internal
    :class:`~utho.data._api._ApiClient`, which builds requests, attaches the
    bearer token at send time, and turns HTTP or API-level failures into
    :class:`~utho.core.errors.UthoError` subclasses.

    **Namespaces**:

        - ``client.account``: account profile
        - ``client.api_keys``: API key management (create, list, delete)
        - ``client.cloud_instances``: cloud instance lifecycle, snapshots and backups, plus power, rebuild and resize actions

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        releases it on exit::

            with UthoClient(token) as client:
                for key in client.api_keys.list():
                    print(key.name)

    Because the token is used for all requests, one client should not be
    shared across different users.

    :param token: API token, or an :class:`~azure.core.credentials.AzureKeyCredential`
        wrapping it. Rotating the credential with ``update()`` affects the next request.
    :type token: :class:`str` or ~azure.core.credentials.AzureKeyCredential
    :param options: Construction options applied in order, e.g.
        :func:`~utho.core.options.with_base_url`. The first failing option aborts construction.
    :param config: Starting configuration. If not provided, defaults are loaded from
        :meth:`~utho.core.config.UthoConfig.from_env`.
    :type config: ~utho.core.config.UthoConfig or None

    :raises MissingCredentialError: If ``token`` is missing or empty.
    :raises InvalidConfigurationError: If the base URL is malformed or an option rejects its value.

    Example::

        from utho import UthoClient, with_timeout

        client = UthoClient("my-token", with_timeout(30))
        try:
            user = client.account.read()
        finally:
            client.close()
    """

    def __init__(
        self,
        token: Union[str, AzureKeyCredential, None],
        *options: ClientOption,
        config: Optional[UthoConfig] = None,
    ) -> None:
        self.auth = _AuthManager(token)

        settings = _ClientSettings.from_config(config or UthoConfig.from_env())
        for option in options:
            option(settings)
        self._config = settings.to_config()

        self._api = _ApiClient(self.auth, self._config, session=settings.session)

        # Initialize operation namespaces
        self.account = AccountOperations(self._api)
        self.api_keys = ApiKeyOperations(self._api)
        self.cloud_instances = CloudInstanceOperations(self._api)

    @classmethod
    def from_env(cls, *options: ClientOption) -> "UthoClient":
        """
        Build a client from ``UTHO_API_TOKEN`` (plus ``UTHO_BASE_URL`` and
        ``UTHO_HTTP_TIMEOUT`` when set).

        :raises MissingCredentialError: If ``UTHO_API_TOKEN`` is unset or empty.
        """
        return cls(os.environ.get("UTHO_API_TOKEN"), *options, config=UthoConfig.from_env())

    @property
    def config(self) -> UthoConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def __enter__(self) -> "UthoClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied
        with :func:`~utho.core.options.with_session`.
        """
        if self._api._http._session is None:
            self._api._http._use_session(requests.Session(), owned=True)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the session created by the context manager.

        A caller-supplied session is left open. Safe to call multiple times.
        """
        self._api.close()
