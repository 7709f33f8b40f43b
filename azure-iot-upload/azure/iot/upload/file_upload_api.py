# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains a client for the IoTHub APIs that enable a device to upload a file to
Azure Storage: requesting a SAS credential for a blob, and notifying IoTHub once the upload
is complete.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple, Union
from .auth import AuthenticationType, UploadAuthentication
from .custom_typing import CredentialCallback, NotificationCallback, StorageInfo
from .exceptions import CredentialResponseError
from .http_transport import HTTPTransport
from .models.upload_result import BlobUploadResult
from .models.x509 import X509
from . import constant, user_agent
from . import http_path_iothub as http_path

logger = logging.getLogger(__name__)

# Header Definitions
HEADER_HOST = "Host"
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_USER_AGENT = "User-Agent"
HEADER_IOTHUB_NAME = "iothub-name"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_JSON_UTF8 = "application/json; charset=utf-8"


class FileUploadApi:
    """Provides methods to use Azure IoT Hub APIs that enable simple upload to a blob."""

    def __init__(
        self,
        device_id: str,
        hostname: str,
        http_transport: Optional[Any] = None,
        sdk_name: str = constant.PACKAGE_NAME,
        sdk_version: str = constant.VERSION,
    ) -> None:
        """Instantiate the client

        :param str device_id: Device identifier
        :param str hostname: Hostname of the Azure IoT Hub instance
        :param http_transport: Transport used to send requests (optional). Any object with a
            compatible .build_request() method. Defaults to :class:`HTTPTransport`
        :param str sdk_name: Name used to identify the SDK in the User-Agent header
        :param str sdk_version: Version used to identify the SDK in the User-Agent header

        :raises: ValueError if device_id or hostname is empty
        """
        if not device_id:
            raise ValueError("device_id cannot be '{}'".format(device_id))
        if not hostname:
            raise ValueError("hostname cannot be '{}'".format(hostname))

        self._device_id = device_id
        self._hostname = hostname
        self._http = http_transport if http_transport else HTTPTransport()
        self._user_agent_string = user_agent.get_user_agent(sdk_name, sdk_version)

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def http_transport(self) -> Any:
        return self._http

    @property
    def user_agent_string(self) -> str:
        return self._user_agent_string

    def request_credential(
        self, blob_name: str, auth: UploadAuthentication, callback: CredentialCallback
    ) -> None:
        """Request a SAS credential from IoTHub for uploading a blob to Azure Storage

        The callback is invoked once the request is complete, with the keyword argument "error"
        set if the request failed, or "result" set to the decoded credential if it succeeded.
        The credential contains a correlation ID as well as the storage SAS parameters.

        :param str blob_name: The name of the blob that will be uploaded
        :param auth: The credential used to authenticate the request
        :type auth: :class:`azure.iot.upload.auth.UploadAuthentication`
        :param Function callback: Function called on completion

        :raises: ValueError if blob_name or auth is empty
        :raises: TypeError if auth is not an UploadAuthentication
        """
        if not blob_name:
            raise ValueError("blob_name cannot be '{}'".format(blob_name))
        _validate_auth(auth)

        path = (
            http_path.get_storage_info_for_blob_path(self._device_id)
            + http_path.get_api_version_query_string()
        )
        body = json.dumps({"blobName": blob_name})
        headers = {
            HEADER_HOST: self._hostname,
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_CONTENT_LENGTH: _content_length(body),
            HEADER_USER_AGENT: self._user_agent_string,
        }
        headers, x509_opts = _apply_auth(headers, auth)

        def on_request_response(error=None, body=None, response=None):
            if error:
                logger.error("Failed to get storage credential for blob '{}'".format(blob_name))
                error.response_body = body
                error.response = response
                callback(error=error)
                return
            try:
                result: StorageInfo = json.loads(body)
            except (TypeError, ValueError) as e:
                logger.error("Unable to decode storage credential returned by IoTHub")
                new_err = CredentialResponseError("IoTHub returned a malformed credential")
                new_err.__cause__ = e
                new_err.response_body = body
                new_err.response = response
                callback(error=new_err)
            else:
                logger.debug("Successfully received storage credential from IoTHub")
                callback(error=None, result=result)

        logger.info("Requesting storage credential for blob '{}' from IoTHub".format(blob_name))
        req = self._http.build_request(
            "POST", path, headers, self._hostname, x509_opts, on_request_response
        )
        req.write(body)
        req.end()

    def notify_upload_complete(
        self,
        correlation_id: str,
        auth: UploadAuthentication,
        upload_result: Union[BlobUploadResult, Dict[str, Any]],
        callback: NotificationCallback,
    ) -> None:
        """Notify IoTHub of the result of an Azure Storage blob upload

        The callback is invoked once the request is complete, with the keyword argument "error"
        set if the request failed, or set to None if it succeeded.

        :param str correlation_id: ID for the blob upload, returned with the credential
        :param auth: The credential used to authenticate the request
        :type auth: :class:`azure.iot.upload.auth.UploadAuthentication`
        :param upload_result: The result of the upload
        :type upload_result: :class:`azure.iot.upload.models.BlobUploadResult` or dict
        :param Function callback: Function called on completion

        :raises: ValueError if correlation_id, auth or upload_result is empty
        :raises: TypeError if auth is not an UploadAuthentication
        """
        if not correlation_id:
            raise ValueError("correlation_id cannot be '{}'".format(correlation_id))
        _validate_auth(auth)
        if not upload_result:
            raise ValueError("upload_result cannot be '{}'".format(upload_result))

        path = (
            http_path.get_notify_blob_upload_status_path(self._device_id, correlation_id)
            + http_path.get_api_version_query_string()
        )
        if isinstance(upload_result, BlobUploadResult):
            body = json.dumps(upload_result.to_dict())
        else:
            body = json.dumps(upload_result)
        headers = {
            HEADER_HOST: self._hostname,
            HEADER_USER_AGENT: self._user_agent_string,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON_UTF8,
            HEADER_CONTENT_LENGTH: _content_length(body),
            HEADER_IOTHUB_NAME: self._hostname.split(".")[0],
        }
        headers, x509_opts = _apply_auth(headers, auth)

        def on_request_response(error=None, body=None, response=None):
            if error:
                logger.error("Failed to notify IoTHub of blob upload '{}'".format(correlation_id))
                callback(error=error)
            else:
                logger.debug("Successfully notified IoTHub of blob upload completion")
                callback(error=None)

        logger.info("Notifying IoTHub of completion of blob upload '{}'".format(correlation_id))
        req = self._http.build_request(
            "POST", path, headers, self._hostname, x509_opts, on_request_response
        )
        req.write(body)
        req.end()


def _apply_auth(
    headers: Dict[str, Any], auth: UploadAuthentication
) -> Tuple[Dict[str, Any], Optional[X509]]:
    """Return the headers and TLS options to use for a request made with the given credential"""
    if auth.auth_type is AuthenticationType.SAS:
        headers[HEADER_AUTHORIZATION] = auth.sastoken
        return (headers, None)
    else:
        return (headers, auth.x509)


def _validate_auth(auth: Any) -> None:
    if not auth:
        raise ValueError("auth cannot be '{}'".format(auth))
    if not isinstance(auth, UploadAuthentication):
        raise TypeError("auth must be an UploadAuthentication, not {}".format(type(auth).__name__))


def _content_length(body: str) -> int:
    return len(body.encode("utf-8"))
