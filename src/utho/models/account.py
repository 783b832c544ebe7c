# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Account profile model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .common import StatusEnvelope, _require_mapping, _str_or_empty

_KNOWN_USER_FIELDS = (
    "id",
    "type",
    "fullname",
    "company",
    "email",
    "mobile",
    "country",
    "currency",
    "availablecredit",
)


@dataclass
class User:
    """
    Profile of the account that owns the API token.

    Fields the SDK does not model explicitly are kept in :attr:`extra`.
    """

    id: str = ""
    type: str = ""
    fullname: str = ""
    company: str = ""
    email: str = ""
    mobile: str = ""
    country: str = ""
    currency: str = ""
    available_credit: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: Any) -> "User":
        data = _require_mapping(data, "user")
        return cls(
            id=_str_or_empty(data.get("id")),
            type=_str_or_empty(data.get("type")),
            fullname=_str_or_empty(data.get("fullname")),
            company=_str_or_empty(data.get("company")),
            email=_str_or_empty(data.get("email")),
            mobile=_str_or_empty(data.get("mobile")),
            country=_str_or_empty(data.get("country")),
            currency=_str_or_empty(data.get("currency")),
            available_credit=_str_or_empty(data.get("availablecredit")),
            extra={k: v for k, v in data.items() if k not in _KNOWN_USER_FIELDS},
        )


@dataclass
class AccountInfo(StatusEnvelope):
    user: User = field(default_factory=User)

    @classmethod
    def from_api_response(cls, data: Any) -> "AccountInfo":
        data = _require_mapping(data, "account")
        user = data.get("user")
        return cls(
            user=User.from_api_response(user) if user is not None else User(),
            **cls._envelope_kwargs(data),
        )
