#!/usr/bin/env python3
# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utho Python SDK - Quickstart

Walks through the read-only parts of the SDK against a real account:
- Account profile
- API key listing
- Cloud instances, OS images and resize plans

Prerequisites:
- ``pip install -e .`` from the repository root
- ``UTHO_API_TOKEN`` set to an API token (``UTHO_BASE_URL`` is optional)

Usage:
    python examples/basic/quickstart.py
"""

import logging
import sys

from utho import ApiError, MissingCredentialError, TransportError, UthoClient, with_telemetry, with_timeout
from utho.core.telemetry import TelemetryConfig


def show_account(client: UthoClient) -> None:
    print("\n👤 Account")
    print("=" * 50)
    user = client.account.read()
    print(f"  {user.fullname} <{user.email}>")
    print(f"  Credit: {user.available_credit} {user.currency}")


def show_api_keys(client: UthoClient) -> None:
    print("\n🔑 API keys")
    print("=" * 50)
    for key in client.api_keys.list():
        mode = "read-write" if key.can_write else "read-only"
        print(f"  {key.id}  {key.name:<20} {mode}")


def show_cloud(client: UthoClient) -> None:
    print("\n☁️  Cloud instances")
    print("=" * 50)
    instances = client.cloud_instances.list()
    if not instances:
        print("  (none)")
    for instance in instances:
        print(f"  {instance.id}  {instance.hostname:<20} {instance.ip:<16} {instance.status}")

    if instances:
        plans = client.cloud_instances.list_resize_plans(instances[0].id)
        print(f"\n  {len(plans)} resize plan(s) available for {instances[0].hostname}")

    images = client.cloud_instances.list_os_images()
    print(f"  {len(images)} OS image(s) available for deployment")


def main():
    # Log each request so the walkthrough shows what is sent
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    telemetry = TelemetryConfig(enable_logging=True, log_level="DEBUG")
    try:
        client = UthoClient.from_env(with_timeout(30), with_telemetry(telemetry))
    except MissingCredentialError:
        print("❌ Set UTHO_API_TOKEN before running this example.")
        sys.exit(1)

    with client:
        try:
            show_account(client)
            show_api_keys(client)
            show_cloud(client)
        except ApiError as e:
            print(f"❌ Utho API error (HTTP {e.status_code}, status {e.api_status!r}): {e.message}")
            sys.exit(1)
        except TransportError as e:
            print(f"❌ Could not reach {client.base_url}: {e.message}")
            sys.exit(1)

    print("\n✅ Done")


if __name__ == "__main__":
    main()
