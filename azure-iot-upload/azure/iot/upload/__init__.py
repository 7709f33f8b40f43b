""" Azure IoT Upload Library

This library provides a client for the Azure IoT Hub file upload APIs, which a device uses to
obtain a credential for uploading a blob to Azure Storage and to notify IoT Hub once the upload is
complete, as well as tools for working with IoT Hub connection strings.
"""

from .file_upload_api import FileUploadApi  # noqa: F401
from .auth import AuthenticationType, UploadAuthentication  # noqa: F401
from .connection_string import ConnectionString, parse  # noqa: F401
from .evented_callback import EventedCallback  # noqa: F401
from .exceptions import (  # noqa: F401
    IoTHubError,
    ProtocolClientError,
    CredentialResponseError,
)
from .models import X509, ProxyOptions, BlobUploadResult  # noqa: F401
from . import models  # noqa: F401
