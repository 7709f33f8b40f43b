# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the azure-iot-upload package
"""

VERSION = "1.0.0"
PACKAGE_NAME = "azure-iot-upload"
IOTHUB_API_VERSION = "2020-09-30"
