# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define exceptions raised or returned by the azure-iot-upload package"""


# Client Exceptions
class ProtocolClientError(Exception):
    """
    Error returned from the HTTP client library
    """

    pass


class CredentialResponseError(Exception):
    """
    The credential returned by IoTHub could not be decoded
    """

    pass


# Service Exceptions
class IoTHubError(Exception):
    """Represents a failure reported by IoT Hub

    Data Attributes:
    status_code (int): HTTP status code of the failed response
    reason (str): HTTP reason phrase of the failed response
    response_body (str): Content of the failed response, if available
    response: The response object returned by the HTTP layer, if available
    """

    def __init__(self, message=None, status_code=None, reason=None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.response_body = None
        self.response = None


class ArgumentError(IoTHubError):
    pass


class UnauthorizedError(IoTHubError):
    pass


class TooManyDevicesError(IoTHubError):
    pass


class NotFoundError(IoTHubError):
    pass


class DeviceNotFoundError(NotFoundError):
    pass


class IotHubNotFoundError(NotFoundError):
    pass


class DeviceTimeoutError(IoTHubError):
    pass


class DeviceAlreadyExistsError(IoTHubError):
    pass


class InvalidEtagError(IoTHubError):
    pass


class ThrottlingError(IoTHubError):
    pass


class InternalServerError(IoTHubError):
    pass


class BadDeviceResponseError(IoTHubError):
    pass


class ServiceUnavailableError(IoTHubError):
    pass


class GatewayTimeoutError(IoTHubError):
    pass
