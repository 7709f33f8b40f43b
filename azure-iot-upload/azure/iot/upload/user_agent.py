# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module is for creating agent strings for requests made to IoTHub"""

import platform

python_runtime = platform.python_version()
os_type = platform.system()
os_release = platform.version()
architecture = platform.machine()


def _get_common_user_agent():
    return "({python_runtime};{os_type} {os_release};{architecture})".format(
        python_runtime=python_runtime,
        os_type=os_type,
        os_release=os_release,
        architecture=architecture,
    )


def get_user_agent(sdk_name, sdk_version):
    """
    Create the user agent identifying the SDK by the given name and version
    """
    return "{sdk_name}/{sdk_version}{common}".format(
        sdk_name=sdk_name, sdk_version=sdk_version, common=_get_common_user_agent()
    )
