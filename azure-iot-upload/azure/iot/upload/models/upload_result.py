# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains a class representing the outcome of a blob upload, reported to IoTHub
once the upload to Azure Storage has finished.
"""

from typing import Optional, Dict, Any

DEFAULT_SUCCESS_STATUS_CODE = 200
UNKNOWN_FAILURE_STATUS_CODE = -1


class BlobUploadResult:
    """Represents the result of uploading a blob to Azure Storage

    :ivar correlation_id: The correlation ID returned by IoTHub with the upload credential
    :ivar is_success: Indicates whether the blob was uploaded successfully
    :ivar status_code: A numeric status code for the upload
    :ivar status_description: A description that corresponds to the status code
    """

    def __init__(
        self,
        is_success: bool,
        status_code: int,
        status_description: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.correlation_id = correlation_id
        self.is_success = is_success
        self.status_code = status_code
        self.status_description = status_description

    def __repr__(self) -> str:
        return "BlobUploadResult(is_success={}, status_code={}, status_description={!r})".format(
            self.is_success, self.status_code, self.status_description
        )

    @classmethod
    def from_storage_response(
        cls,
        correlation_id: Optional[str] = None,
        error: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        status_description: Optional[str] = None,
    ) -> "BlobUploadResult":
        """Create a BlobUploadResult from the outcome of an Azure Storage upload

        :param str correlation_id: The correlation ID returned by IoTHub with the upload credential
        :param error: The error raised by the upload, if it failed
        :param int status_code: The status code of the storage response, if known
        :param str status_description: A description of the storage response, if known

        :returns: A BlobUploadResult describing the outcome
        """
        if error is not None:
            error_status_code = getattr(error, "status_code", None)
            return cls(
                is_success=False,
                status_code=(
                    error_status_code
                    if error_status_code is not None
                    else UNKNOWN_FAILURE_STATUS_CODE
                ),
                status_description=str(error),
                correlation_id=correlation_id,
            )
        else:
            return cls(
                is_success=True,
                status_code=(
                    status_code if status_code is not None else DEFAULT_SUCCESS_STATUS_CODE
                ),
                status_description=status_description or "",
                correlation_id=correlation_id,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Return the representation of the result used in the notification request body"""
        result: Dict[str, Any] = {}
        if self.correlation_id:
            result["correlationId"] = self.correlation_id
        result["isSuccess"] = self.is_success
        result["statusCode"] = self.status_code
        result["statusDescription"] = self.status_description
        return result
