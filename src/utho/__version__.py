# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

__version__ = "1.0.0"
