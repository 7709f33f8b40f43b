# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import urllib.parse
from . import constant

logger = logging.getLogger(__name__)


def _encode(value):
    # Every reserved character is encoded, including '/' and '+'
    return urllib.parse.quote(value, safe="")


def get_api_version_query_string():
    """
    :return: The query string selecting the IoTHub API version. It is of the format
    ?api-version=$api_version
    """
    return "?api-version={}".format(constant.IOTHUB_API_VERSION)


def get_storage_info_for_blob_path(device_id):
    """
    :return: The path for getting the storage sdk credential information from IoT Hub. It is of the format
    /devices/uri_encode($device_id)/files
    """
    return "/devices/{}/files".format(_encode(device_id))


def get_notify_blob_upload_status_path(device_id, correlation_id):
    """
    :return: The path for notifying IoT Hub of the completion of a blob upload. It is of the format
    /devices/uri_encode($device_id)/files/notifications/uri_encode($correlation_id)
    """
    return "/devices/{}/files/notifications/{}".format(
        _encode(device_id), _encode(correlation_id)
    )
