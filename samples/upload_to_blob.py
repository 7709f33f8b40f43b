# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import os
import logging
import requests
from azure.iot.upload import (
    FileUploadApi,
    UploadAuthentication,
    EventedCallback,
    BlobUploadResult,
    X509,
)

logging.basicConfig(level=logging.INFO)

"""
Welcome to the Upload to Blob sample for the Azure IoT Upload Library for Python.

This sample covers the following FileUploadApi operations:

    request_credential
        - used to get a SAS credential from IoT Hub for the linked Storage Account, including
        a hostname, a container name, a blob name, and a sas token. Additionally it returns a
        correlation_id which is used by notify_upload_complete.
    notify_upload_complete
        - used to notify IoT Hub of the result of the blob upload, using the correlation_id
        returned with the credential.

The blob itself is uploaded with a plain HTTP PUT to the SAS URL.
"""

IOTHUB_HOSTNAME = os.getenv("IOTHUB_HOSTNAME")
IOTHUB_DEVICE_ID = os.getenv("IOTHUB_DEVICE_ID")

X509_CERT_FILE = os.getenv("X509_CERT_FILE")
X509_KEY_FILE = os.getenv("X509_KEY_FILE")
X509_PASS_PHRASE = os.getenv("PASS_PHRASE")


def upload_via_sas_url(storage_info, data):
    sas_url = "https://{}/{}/{}{}".format(
        storage_info["hostName"],
        storage_info["containerName"],
        storage_info["blobName"],
        storage_info["sasToken"],
    )
    response = requests.put(sas_url, data=data, headers={"x-ms-blob-type": "BlockBlob"})
    response.raise_for_status()
    return response


def main():
    x509 = X509(cert_file=X509_CERT_FILE, key_file=X509_KEY_FILE, pass_phrase=X509_PASS_PHRASE)
    auth = UploadAuthentication.from_x509(x509)
    api = FileUploadApi(IOTHUB_DEVICE_ID, IOTHUB_HOSTNAME)

    # Get the storage credential from IoT Hub
    callback = EventedCallback()
    api.request_credential("sample_blob.txt", auth, callback)
    storage_info = callback.wait_for_completion()

    try:
        response = upload_via_sas_url(storage_info, b"Hello, World!")
    except requests.RequestException as e:
        print("Upload failed: {}".format(e))
        result = BlobUploadResult.from_storage_response(
            correlation_id=storage_info["correlationId"], error=e
        )
    else:
        result = BlobUploadResult.from_storage_response(
            correlation_id=storage_info["correlationId"],
            status_code=response.status_code,
            status_description=response.reason,
        )

    # Report the result of the upload to IoT Hub
    callback = EventedCallback()
    api.notify_upload_complete(storage_info["correlationId"], auth, result, callback)
    callback.wait_for_completion()
    print("Notified IoT Hub: {}".format(result))


if __name__ == "__main__":
    main()
