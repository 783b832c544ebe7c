# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal transport used by every operation namespace."""

__all__ = []
