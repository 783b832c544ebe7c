# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Base endpoint normalization and relative path resolution."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit, urlunsplit

from ._error_codes import CONFIG_INVALID_BASE_URL, REQUEST_ABSOLUTE_PATH
from .errors import InvalidConfigurationError, InvalidRequestError


def _ensure_trailing_slash(url: str) -> str:
    """
    Parse ``url`` and make sure its path ends with ``/``.

    :param url: Absolute base endpoint, e.g. ``"https://api.utho.com/v2"``.
    :type url: :class:`str`
    :return: The normalized endpoint, e.g. ``"https://api.utho.com/v2/"``.
    :rtype: :class:`str`
    :raises InvalidConfigurationError: If ``url`` is not an absolute http(s) URL.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidConfigurationError("base URL is required", subcode=CONFIG_INVALID_BASE_URL)
    try:
        parts = urlsplit(url.strip())
        # Accessing port validates it
        parts.port
    except ValueError as exc:
        raise InvalidConfigurationError(
            f"base URL is not a well-formed URL: {url!r}", subcode=CONFIG_INVALID_BASE_URL
        ) from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidConfigurationError(
            f"base URL must be an absolute http(s) URL: {url!r}", subcode=CONFIG_INVALID_BASE_URL
        )
    path = parts.path
    if not path.endswith("/"):
        path += "/"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def _resolve(base_url: str, path: str) -> str:
    """
    Resolve ``path`` against ``base_url`` using standard relative-URL rules.

    Relative paths must be given without a leading slash; a leading slash would
    replace the base path (``/v2/``) instead of extending it.
    """
    if path.startswith("/"):
        raise InvalidRequestError(
            f"relative path must not start with '/': {path!r}", subcode=REQUEST_ABSOLUTE_PATH
        )
    return urljoin(base_url, path)
