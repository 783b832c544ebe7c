# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for the client.cloud_instances namespace."""

import pytest
import requests

from utho import ApiError, TransportError
from utho.models.cloud_instance import (
    DELETE_CONFIRMATION,
    REBUILD_CONFIRMATION,
    CloudHostname,
    CreateCloudInstanceParams,
    DeleteCloudInstanceParams,
    OsImage,
    Plan,
    RebuildCloudInstanceParams,
    ResizeCloudInstanceParams,
)

INSTANCE = {
    "cloudid": "1277202",
    "hostname": "web-1",
    "ip": "103.146.242.10",
    "cpu": "1",
    "ram": "1024",
    "disksize": 25,
    "status": "Active",
    "billingcycle": "hourly",
    "created_at": "2024-01-05 09:12:44",
    "image": {"name": "Ubuntu 22.04", "distribution": "ubuntu"},
    "dclocation": {"location": "Bangalore", "country": "India", "dc": "inbangalore", "dccc": "in"},
}

LIST_BODY = {"status": "success", "cloud": [INSTANCE, dict(INSTANCE, cloudid="1277203", hostname="web-2")]}


def _params():
    return CreateCloudInstanceParams(
        dcslug="inbangalore",
        image="ubuntu-22.04-x86_64",
        planid="10045",
        cloud=[CloudHostname("web-1")],
        firewall="23432",
    )


class TestCloudInstanceCrud:
    def test_create(self, make_client, response):
        body = {"status": "success", "message": "Cloud Server deploy in process", "cloudid": "1277202",
                "password": "s3cret", "ipv4": "103.146.242.10"}
        client, session = make_client(response(200, body))

        got = client.cloud_instances.create(_params())

        assert got.cloudid == "1277202"
        assert got.password == "s3cret"
        assert got.ipv4 == "103.146.242.10"
        assert session.last_call["method"] == "POST"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/deploy"
        assert session.last_json() == {
            "dcslug": "inbangalore",
            "image": "ubuntu-22.04-x86_64",
            "planid": "10045",
            "billingcycle": "hourly",
            "cloud": [{"hostname": "web-1"}],
            "firewall": "23432",
        }

    def test_create_failed_status(self, make_client, response):
        client, _ = make_client(response(200, {"status": "error", "message": "Insufficient balance"}))
        with pytest.raises(ApiError, match="Insufficient balance"):
            client.cloud_instances.create(_params())

    def test_create_unreachable_server(self, make_client):
        client, _ = make_client(requests.exceptions.ConnectTimeout("timed out"))
        with pytest.raises(TransportError):
            client.cloud_instances.create(_params())

    def test_read(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "cloud": [INSTANCE]}))

        instance = client.cloud_instances.read("1277202")

        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202"
        assert instance.id == "1277202"
        assert instance.hostname == "web-1"
        assert instance.status == "Active"
        assert instance.disk_size == "25"
        assert instance.dclocation["dc"] == "inbangalore"

    def test_read_empty_envelope(self, make_client, response):
        client, _ = make_client(response(200, {"status": "success", "cloud": []}))
        with pytest.raises(ApiError) as ei:
            client.cloud_instances.read("missing")
        assert ei.value.subcode == "api_resource_not_found"

    def test_read_not_found(self, make_client, response):
        client, _ = make_client(response(404, {"status": "error", "message": "Cloud server not found"}))
        with pytest.raises(ApiError) as ei:
            client.cloud_instances.read("missing")
        assert ei.value.status_code == 404
        assert ei.value.message == "Cloud server not found"

    def test_list(self, make_client, response):
        client, session = make_client(response(200, LIST_BODY))

        instances = client.cloud_instances.list()

        assert [i.id for i in instances] == ["1277202", "1277203"]
        assert [i.hostname for i in instances] == ["web-1", "web-2"]
        assert session.last_call["url"] == "https://api.example.com/v2/cloud"

    def test_delete_sends_confirmation(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "message": "success"}))

        got = client.cloud_instances.delete("1277202")

        assert got.status == "success"
        assert session.last_call["method"] == "DELETE"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/destroy"
        assert session.last_json() == {"confirm": DELETE_CONFIRMATION}

    def test_delete_with_custom_confirmation(self, make_client, response):
        client, _ = make_client(response(200, {"status": "error", "message": "Confirmation text mismatch"}))
        with pytest.raises(ApiError, match="Confirmation text mismatch"):
            client.cloud_instances.delete("1277202", DeleteCloudInstanceParams(confirm="yes"))


class TestCloudInstanceLookups:
    def test_list_os_images(self, make_client, response):
        body = {
            "status": "success",
            "images": [
                {"distro": "ubuntu", "distribution": "Ubuntu", "version": "22.04 x86_64",
                 "image": "ubuntu-22.04-x86_64", "cost": 0},
            ],
        }
        client, session = make_client(response(200, body))

        images = client.cloud_instances.list_os_images()

        assert images == [OsImage("ubuntu", "Ubuntu", "22.04 x86_64", "ubuntu-22.04-x86_64", "0")]
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/images"

    def test_list_resize_plans(self, make_client, response):
        body = {
            "status": "success",
            "plans": [{"id": "10046", "type": "Basic", "disk": "40", "ram": "2048", "cpu": "1",
                       "bandwidth": "1000", "slug": "basic-2gb", "price": 1.2, "monthly": 800}],
        }
        client, session = make_client(response(200, body))

        plans = client.cloud_instances.list_resize_plans("1277202")

        assert plans == [Plan("10046", "Basic", "40", "2048", "1", "1000", "basic-2gb", "1.2", "800")]
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/resizeplans"


class TestCloudInstanceActions:
    def test_create_snapshot(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "message": "queued", "id": "88"}))

        got = client.cloud_instances.create_snapshot("1277202")

        assert got.id == "88"
        assert session.last_call["method"] == "POST"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/snapshot/create"
        assert session.last_call["data"] is None

    def test_delete_snapshot(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "message": "success"}))

        client.cloud_instances.delete_snapshot("1277202", "88")

        assert session.last_call["method"] == "DELETE"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/snapshot/88/delete"

    @pytest.mark.parametrize(
        "method_name, suffix",
        [
            ("enable_backup", "backups/enable"),
            ("disable_backup", "backups/disable"),
            ("hard_reboot", "hardreboot"),
            ("power_cycle", "powercycle"),
            ("power_off", "poweroff"),
            ("power_on", "poweron"),
        ],
    )
    def test_actions(self, make_client, response, method_name, suffix):
        client, session = make_client(response(200, {"status": "success", "message": "done"}))

        got = getattr(client.cloud_instances, method_name)("1277202")

        assert got.message == "done"
        assert session.last_call["method"] == "POST"
        assert session.last_call["url"] == f"https://api.example.com/v2/cloud/1277202/{suffix}"

    @pytest.mark.parametrize(
        "method_name", ["enable_backup", "disable_backup", "hard_reboot", "power_cycle", "power_off", "power_on"]
    )
    def test_actions_failed_status(self, make_client, response, method_name):
        client, _ = make_client(response(200, {"status": "error", "message": "Server is locked"}))
        with pytest.raises(ApiError, match="Server is locked"):
            getattr(client.cloud_instances, method_name)("1277202")

    def test_actions_send_no_body(self, make_client, response):
        client, session = make_client(response(200, {"status": "success"}))
        client.cloud_instances.power_off("1277202")
        assert session.last_call["data"] is None

    def test_restore_snapshot(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "message": "restoring"}))

        got = client.cloud_instances.restore_snapshot("1277202", "88")

        assert got.message == "restoring"
        assert session.last_call["method"] == "POST"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/snapshot/88/restore"
        assert session.last_call["headers"]["Authorization"] == "Bearer tok"

    def test_restore_snapshot_failed_status(self, make_client, response):
        client, _ = make_client(response(200, {"status": "error", "message": "Snapshot not found"}))
        with pytest.raises(ApiError, match="Snapshot not found"):
            client.cloud_instances.restore_snapshot("1277202", "missing")

    def test_rebuild(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "message": "rebuilding"}))

        got = client.cloud_instances.rebuild("1277202", RebuildCloudInstanceParams(image="almalinux-9.2-x86_64"))

        assert got.status == "success"
        assert session.last_call["method"] == "POST"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/rebuild"
        assert session.last_json() == {"image": "almalinux-9.2-x86_64", "confirm": REBUILD_CONFIRMATION}

    def test_rebuild_failed_status(self, make_client, response):
        client, _ = make_client(response(200, {"status": "error", "message": "Invalid confirmation"}))
        with pytest.raises(ApiError, match="Invalid confirmation"):
            client.cloud_instances.rebuild("1277202", RebuildCloudInstanceParams(image="x", confirm="yes"))

    def test_resize(self, make_client, response):
        client, session = make_client(response(200, {"status": "success", "message": "resizing"}))

        got = client.cloud_instances.resize("1277202", ResizeCloudInstanceParams(type="ramcpu", plan=11111))

        assert got.message == "resizing"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/resize"
        assert session.last_json() == {"type": "ramcpu", "plan": 11111}

    def test_resize_server_error(self, make_client, response):
        client, _ = make_client(response(400, {"status": "error", "message": "Plan unavailable"}))
        with pytest.raises(ApiError) as ei:
            client.cloud_instances.resize("1277202", ResizeCloudInstanceParams(type="ramcpu", plan=1))
        assert ei.value.status_code == 400
        assert ei.value.message == "Plan unavailable"

    def test_reset_password(self, make_client, response):
        body = {"status": "success", "message": "Password reset", "password": "n3w-Pass"}
        client, session = make_client(response(200, body))

        got = client.cloud_instances.reset_password("1277202")

        assert got.password == "n3w-Pass"
        assert session.last_call["method"] == "POST"
        assert session.last_call["url"] == "https://api.example.com/v2/cloud/1277202/resetpassword"

    def test_reset_password_failed_status(self, make_client, response):
        client, _ = make_client(response(200, {"status": "error", "message": "Server is locked"}))
        with pytest.raises(ApiError, match="Server is locked"):
            client.cloud_instances.reset_password("1277202")
