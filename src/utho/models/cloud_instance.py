# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Cloud instance models.

Provides request payloads and decoded responses for the ``cloud/*``
endpoints: instances, OS images and resize plans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .common import StatusEnvelope, _require_mapping, _str_or_empty

DELETE_CONFIRMATION = "I am aware this action will delete data and server permanently"
REBUILD_CONFIRMATION = "I am aware this action will delete data permanently and build a fresh server"


@dataclass
class CloudInstance:
    """
    A deployed cloud instance.

    :param id: Instance id (``cloudid`` on the wire).
    :type id: str
    :param hostname: Hostname given at deployment.
    :type hostname: str
    :param ip: Primary public IPv4 address.
    :type ip: str
    :param status: Power/provisioning state, e.g. ``"Active"``. Unrelated to
        the envelope ``status`` of the response that carried it.
    :type status: str
    :param dclocation: Data centre descriptor as returned by the API.
    :type dclocation: dict
    """

    id: str
    hostname: str = ""
    ip: str = ""
    cpu: str = ""
    ram: str = ""
    disk_size: str = ""
    status: str = ""
    billing_cycle: str = ""
    created_at: str = ""
    image: Dict[str, Any] = field(default_factory=dict)
    dclocation: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: Any) -> "CloudInstance":
        data = _require_mapping(data, "cloud instance")
        return cls(
            id=_str_or_empty(data.get("cloudid")),
            hostname=_str_or_empty(data.get("hostname")),
            ip=_str_or_empty(data.get("ip")),
            cpu=_str_or_empty(data.get("cpu")),
            ram=_str_or_empty(data.get("ram")),
            disk_size=_str_or_empty(data.get("disksize")),
            status=_str_or_empty(data.get("status")),
            billing_cycle=_str_or_empty(data.get("billingcycle")),
            created_at=_str_or_empty(data.get("created_at")),
            image=dict(data.get("image") or {}),
            dclocation=dict(data.get("dclocation") or {}),
        )


@dataclass
class CloudInstanceList(StatusEnvelope):
    cloud: List[CloudInstance] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any) -> "CloudInstanceList":
        data = _require_mapping(data, "cloud instance list")
        return cls(
            cloud=[CloudInstance.from_api_response(item) for item in data.get("cloud") or []],
            **cls._envelope_kwargs(data),
        )


@dataclass
class CloudHostname:
    hostname: str


@dataclass
class CreateCloudInstanceParams:
    """
    Payload for ``cloud/deploy``.

    Only non-empty optional fields are sent.

    Example::

        params = CreateCloudInstanceParams(
            dcslug="inbangalore",
            image="ubuntu-22.04-x86_64",
            planid="10045",
            cloud=[CloudHostname("web-1")],
        )
    """

    dcslug: str
    image: str
    planid: str
    cloud: List[CloudHostname] = field(default_factory=list)
    billingcycle: str = "hourly"
    auth: Optional[str] = None
    root_password: Optional[str] = None
    firewall: Optional[str] = None
    enablebackup: Optional[str] = None
    support: Optional[str] = None
    management: Optional[str] = None
    sshkeys: Optional[str] = None
    backupid: Optional[str] = None
    snapshotid: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "dcslug": self.dcslug,
            "image": self.image,
            "planid": self.planid,
            "billingcycle": self.billingcycle,
            "cloud": [{"hostname": c.hostname} for c in self.cloud],
        }
        for name in (
            "auth",
            "root_password",
            "firewall",
            "enablebackup",
            "support",
            "management",
            "sshkeys",
            "backupid",
            "snapshotid",
        ):
            value = getattr(self, name)
            if value:
                body[name] = value
        return body


@dataclass
class CreateCloudInstanceResponse(StatusEnvelope):
    cloudid: str = ""
    password: str = ""
    ipv4: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "CreateCloudInstanceResponse":
        data = _require_mapping(data, "create cloud instance")
        return cls(
            cloudid=_str_or_empty(data.get("cloudid")),
            password=_str_or_empty(data.get("password")),
            ipv4=_str_or_empty(data.get("ipv4")),
            **cls._envelope_kwargs(data),
        )


@dataclass
class DeleteCloudInstanceParams:
    """Destroy confirmation; the API rejects any other phrase."""

    confirm: str = DELETE_CONFIRMATION

    def to_dict(self) -> Dict[str, Any]:
        return {"confirm": self.confirm}


@dataclass
class OsImage:
    distro: str = ""
    distribution: str = ""
    version: str = ""
    image: str = ""
    cost: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "OsImage":
        data = _require_mapping(data, "os image")
        return cls(
            distro=_str_or_empty(data.get("distro")),
            distribution=_str_or_empty(data.get("distribution")),
            version=_str_or_empty(data.get("version")),
            image=_str_or_empty(data.get("image")),
            cost=_str_or_empty(data.get("cost")),
        )


@dataclass
class OsImageList(StatusEnvelope):
    images: List[OsImage] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any) -> "OsImageList":
        data = _require_mapping(data, "os image list")
        return cls(
            images=[OsImage.from_api_response(item) for item in data.get("images") or []],
            **cls._envelope_kwargs(data),
        )


@dataclass
class Plan:
    """A plan an instance can be resized to."""

    id: str = ""
    type: str = ""
    disk: str = ""
    ram: str = ""
    cpu: str = ""
    bandwidth: str = ""
    slug: str = ""
    price: str = ""
    monthly: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "Plan":
        data = _require_mapping(data, "plan")
        return cls(**{name: _str_or_empty(data.get(name)) for name in cls.__dataclass_fields__})


@dataclass
class ResizePlanList(StatusEnvelope):
    plans: List[Plan] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any) -> "ResizePlanList":
        data = _require_mapping(data, "resize plan list")
        return cls(
            plans=[Plan.from_api_response(item) for item in data.get("plans") or []],
            **cls._envelope_kwargs(data),
        )


@dataclass
class RebuildCloudInstanceParams:
    """
    Payload for ``cloud/{id}/rebuild``: reinstall ``image`` on an existing instance.

    All data on the instance is lost; ``confirm`` must carry the phrase the API expects.
    """

    image: str
    confirm: str = REBUILD_CONFIRMATION

    def to_dict(self) -> Dict[str, Any]:
        return {"image": self.image, "confirm": self.confirm}


@dataclass
class ResizeCloudInstanceParams:
    """
    Payload for ``cloud/{id}/resize``.

    :param type: What to resize, e.g. ``"ramcpu"``.
    :type type: str
    :param plan: Target plan id, as listed by ``list_resize_plans``.
    :type plan: int
    """

    type: str
    plan: int

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "plan": self.plan}


@dataclass
class ResetPasswordResponse(StatusEnvelope):
    """New root password generated by ``cloud/{id}/resetpassword``."""

    password: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "ResetPasswordResponse":
        data = _require_mapping(data, "reset password")
        return cls(password=_str_or_empty(data.get("password")), **cls._envelope_kwargs(data))
