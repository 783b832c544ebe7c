# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Account operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.account import AccountInfo, User

if TYPE_CHECKING:
    from ..data._api import _ApiClient


class AccountOperations:
    """
    Account operations.

    Accessed via ``client.account``.

    Example::

        user = client.account.read()
        print(user.email, user.available_credit)
    """

    def __init__(self, api: "_ApiClient") -> None:
        self._api = api

    def read(self) -> User:
        """
        Fetch the profile of the account that owns the API token.

        :return: The account profile.
        :rtype: ~utho.models.account.User
        :raises ApiError: On HTTP failure or when the response status is not ``"success"``.
        """
        info = self._api._call("GET", "account/info", AccountInfo, operation="account.read")
        info.raise_for_api_status()
        return info.user
