# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Cloud instance operations namespace."""

from __future__ import annotations

from typing import Any, List, Optional, TYPE_CHECKING

from ..core._error_codes import API_RESOURCE_NOT_FOUND
from ..core.errors import ApiError
from ..models.cloud_instance import (
    CloudInstance,
    CloudInstanceList,
    CreateCloudInstanceParams,
    CreateCloudInstanceResponse,
    DeleteCloudInstanceParams,
    OsImage,
    OsImageList,
    Plan,
    RebuildCloudInstanceParams,
    ResetPasswordResponse,
    ResizeCloudInstanceParams,
    ResizePlanList,
)
from ..models.common import BasicResponse, CreateBasicResponse, DeleteResponse

if TYPE_CHECKING:
    from ..data._api import _ApiClient


class CloudInstanceOperations:
    """
    Cloud instance lifecycle operations.

    Accessed via ``client.cloud_instances``.

    Example:
        Deploy an instance, then reboot and destroy it::

            created = client.cloud_instances.create(
                CreateCloudInstanceParams(
                    dcslug="inbangalore",
                    image="ubuntu-22.04-x86_64",
                    planid="10045",
                    cloud=[CloudHostname("web-1")],
                )
            )
            instance = client.cloud_instances.read(created.cloudid)
            client.cloud_instances.hard_reboot(instance.id)
            client.cloud_instances.delete(instance.id)
    """

    def __init__(self, api: "_ApiClient") -> None:
        self._api = api

    # ------------------------------------------------------------- instances

    def create(self, params: CreateCloudInstanceParams) -> CreateCloudInstanceResponse:
        """
        Deploy a new cloud instance.

        :param params: Location, image, plan and hostnames of the instance.
        :type params: ~utho.models.cloud_instance.CreateCloudInstanceParams
        :return: Id, root password and address of the new instance.
        :rtype: ~utho.models.cloud_instance.CreateCloudInstanceResponse
        """
        created = self._api._call(
            "POST", "cloud/deploy", CreateCloudInstanceResponse, params, operation="cloud_instances.create"
        )
        created.raise_for_api_status()
        return created

    def read(self, instance_id: str) -> CloudInstance:
        """
        Fetch a single cloud instance.

        :param instance_id: Instance id.
        :type instance_id: str
        :return: The instance.
        :rtype: ~utho.models.cloud_instance.CloudInstance
        :raises ApiError: If the request fails, the response status is not
            ``"success"``, or the response holds no instance.
        """
        instances = self._api._call(
            "GET", f"cloud/{instance_id}", CloudInstanceList, operation="cloud_instances.read"
        )
        instances.raise_for_api_status()
        if not instances.cloud:
            raise ApiError(f"cloud instance {instance_id} not found", subcode=API_RESOURCE_NOT_FOUND)
        return instances.cloud[0]

    def list(self) -> List[CloudInstance]:
        """List all cloud instances on the account."""
        instances = self._api._call("GET", "cloud", CloudInstanceList, operation="cloud_instances.list")
        instances.raise_for_api_status()
        return instances.cloud

    def delete(
        self,
        instance_id: str,
        params: Optional[DeleteCloudInstanceParams] = None,
    ) -> DeleteResponse:
        """
        Destroy a cloud instance and all of its data.

        :param instance_id: Instance id.
        :type instance_id: str
        :param params: Destroy confirmation. Defaults to the phrase the API requires.
        :type params: ~utho.models.cloud_instance.DeleteCloudInstanceParams or None
        """
        params = params or DeleteCloudInstanceParams()
        deleted = self._api._call(
            "DELETE", f"cloud/{instance_id}/destroy", DeleteResponse, params, operation="cloud_instances.delete"
        )
        deleted.raise_for_api_status()
        return deleted

    # ---------------------------------------------------------------- lookups

    def list_os_images(self) -> List[OsImage]:
        """List the OS images available for deployment."""
        images = self._api._call("GET", "cloud/images", OsImageList, operation="cloud_instances.list_os_images")
        images.raise_for_api_status()
        return images.images

    def list_resize_plans(self, instance_id: str) -> List[Plan]:
        """List the plans ``instance_id`` can be resized to."""
        plans = self._api._call(
            "GET", f"cloud/{instance_id}/resizeplans", ResizePlanList, operation="cloud_instances.list_resize_plans"
        )
        plans.raise_for_api_status()
        return plans.plans

    # -------------------------------------------------------------- snapshots

    def create_snapshot(self, instance_id: str) -> CreateBasicResponse:
        created = self._api._call(
            "POST", f"cloud/{instance_id}/snapshot/create", CreateBasicResponse, operation="cloud_instances.create_snapshot"
        )
        created.raise_for_api_status()
        return created

    def delete_snapshot(self, instance_id: str, snapshot_id: str) -> DeleteResponse:
        deleted = self._api._call(
            "DELETE",
            f"cloud/{instance_id}/snapshot/{snapshot_id}/delete",
            DeleteResponse,
            operation="cloud_instances.delete_snapshot",
        )
        deleted.raise_for_api_status()
        return deleted

    def restore_snapshot(self, instance_id: str, snapshot_id: str) -> BasicResponse:
        """Roll ``instance_id`` back to snapshot ``snapshot_id``."""
        return self._action(instance_id, f"snapshot/{snapshot_id}/restore", "cloud_instances.restore_snapshot")

    # ---------------------------------------------------------------- actions

    def enable_backup(self, instance_id: str) -> BasicResponse:
        return self._action(instance_id, "backups/enable", "cloud_instances.enable_backup")

    def disable_backup(self, instance_id: str) -> BasicResponse:
        return self._action(instance_id, "backups/disable", "cloud_instances.disable_backup")

    def hard_reboot(self, instance_id: str) -> BasicResponse:
        return self._action(instance_id, "hardreboot", "cloud_instances.hard_reboot")

    def power_cycle(self, instance_id: str) -> BasicResponse:
        return self._action(instance_id, "powercycle", "cloud_instances.power_cycle")

    def power_off(self, instance_id: str) -> BasicResponse:
        return self._action(instance_id, "poweroff", "cloud_instances.power_off")

    def power_on(self, instance_id: str) -> BasicResponse:
        return self._action(instance_id, "poweron", "cloud_instances.power_on")

    def rebuild(self, instance_id: str, params: RebuildCloudInstanceParams) -> BasicResponse:
        """
        Reinstall the operating system of ``instance_id``, wiping its disk.

        :param params: Image to install and the rebuild confirmation phrase.
        :type params: ~utho.models.cloud_instance.RebuildCloudInstanceParams
        """
        return self._action(instance_id, "rebuild", "cloud_instances.rebuild", params)

    def resize(self, instance_id: str, params: ResizeCloudInstanceParams) -> BasicResponse:
        """
        Move ``instance_id`` to another plan.

        :param params: Resize type and target plan id.
        :type params: ~utho.models.cloud_instance.ResizeCloudInstanceParams
        """
        return self._action(instance_id, "resize", "cloud_instances.resize", params)

    def reset_password(self, instance_id: str) -> ResetPasswordResponse:
        """
        Generate a new root password for ``instance_id``.

        :return: Envelope carrying the new password.
        :rtype: ~utho.models.cloud_instance.ResetPasswordResponse
        """
        result = self._api._call(
            "POST",
            f"cloud/{instance_id}/resetpassword",
            ResetPasswordResponse,
            operation="cloud_instances.reset_password",
        )
        result.raise_for_api_status()
        return result

    def _action(
        self, instance_id: str, action: str, operation: str, payload: Optional[Any] = None
    ) -> BasicResponse:
        """POST ``payload`` (or no body) to ``cloud/{instance_id}/{action}``."""
        result = self._api._call(
            "POST", f"cloud/{instance_id}/{action}", BasicResponse, payload, operation=operation
        )
        result.raise_for_api_status()
        return result
