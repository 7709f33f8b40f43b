# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module represents a client certificate that can be used in place of a shared access
signature to authenticate a device to IoTHub over mutual TLS.
"""

from typing import Optional


class X509:
    """
    A class with references to the certificate, key, and optional pass-phrase used to authenticate
    a TLS connection using x509 certificates
    """

    def __init__(self, cert_file: str, key_file: str, pass_phrase: Optional[str] = None) -> None:
        """
        Initializer for X509 Certificate
        :param cert_file: The file path to contents of the certificate (or certificate chain)
         used to authenticate the device.
        :param key_file: The file path to the key associated with the certificate
        :param pass_phrase: (optional) The pass_phrase used to encode the key file
        """
        self._cert_file = cert_file
        self._key_file = key_file
        self._pass_phrase = pass_phrase

    @property
    def certificate_file(self) -> str:
        return self._cert_file

    @property
    def key_file(self) -> str:
        return self._key_file

    @property
    def pass_phrase(self) -> Optional[str]:
        return self._pass_phrase
