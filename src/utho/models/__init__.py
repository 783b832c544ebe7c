# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request and response models for the Utho SDK.

- :mod:`~utho.models.common`: status envelope and generic action/delete responses.
- :mod:`~utho.models.account`: account profile.
- :mod:`~utho.models.api_key`: API keys.
- :mod:`~utho.models.cloud_instance`: cloud instances, OS images and plans.

Import models from their modules directly.
"""

__all__ = []
