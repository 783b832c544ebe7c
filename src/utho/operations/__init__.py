# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Utho SDK.

Each class maps one resource family onto its endpoints:
- AccountOperations: account profile
- ApiKeyOperations: API key management
- CloudInstanceOperations: cloud instance lifecycle
"""

__all__ = []
