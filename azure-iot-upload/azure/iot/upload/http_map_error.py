# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
from . import exceptions

_status_code_to_error = {
    400: exceptions.ArgumentError,
    401: exceptions.UnauthorizedError,
    403: exceptions.TooManyDevicesError,
    408: exceptions.DeviceTimeoutError,
    409: exceptions.DeviceAlreadyExistsError,
    412: exceptions.InvalidEtagError,
    429: exceptions.ThrottlingError,
    500: exceptions.InternalServerError,
    502: exceptions.BadDeviceResponseError,
    503: exceptions.ServiceUnavailableError,
    504: exceptions.GatewayTimeoutError,
}


def translate_error(sc, reason):
    """
    Return an IoTHubError instance corresponding to a failed HTTP response.

    :param int sc: The HTTP status code of the response
    :param str reason: The HTTP reason phrase of the response
    :returns: The error representing the failure
    :rtype: :class:`azure.iot.upload.exceptions.IoTHubError`
    """
    message = "IoTHub responded with a failed status ({sc}) - {reason}".format(
        sc=sc, reason=reason
    )
    if sc == 404:
        if reason == "Device Not Found":
            error_class = exceptions.DeviceNotFoundError
        elif reason == "IoTHub Not Found":
            error_class = exceptions.IotHubNotFoundError
        else:
            error_class = exceptions.NotFoundError
    else:
        # Unknown status codes are reported as a generic IoTHubError
        error_class = _status_code_to_error.get(sc, exceptions.IoTHubError)

    return error_class(message, status_code=sc, reason=reason)
