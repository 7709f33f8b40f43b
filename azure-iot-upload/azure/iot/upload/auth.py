# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines the credentials a device can present to the IoTHub file upload API.

A device authenticates either with a Shared Access Signature, sent in the Authorization header,
or with an X509 certificate, presented during the TLS handshake.
"""

import enum
from typing import Any, Optional
from .models.x509 import X509
from .sastoken import NonRenewableSasToken, SasTokenError

__all__ = ["AuthenticationType", "UploadAuthentication"]


class AuthenticationType(enum.Enum):
    SAS = "sas"
    X509 = "x509"


class UploadAuthentication:
    """Credential used to authenticate a file upload request.

    Use the factory methods rather than the initializer.
    """

    def __init__(
        self,
        auth_type: AuthenticationType,
        sastoken: Optional[Any] = None,
        x509: Optional[X509] = None,
    ) -> None:
        if auth_type is AuthenticationType.SAS and not sastoken:
            raise ValueError("sastoken is required for SAS authentication")
        if auth_type is AuthenticationType.X509 and not x509:
            raise ValueError("x509 is required for X509 authentication")
        self._auth_type = auth_type
        self._sastoken = sastoken
        self._x509 = x509

    def __repr__(self) -> str:
        return "UploadAuthentication(auth_type={})".format(self._auth_type)

    @classmethod
    def from_sastoken(cls, sastoken: Any) -> "UploadAuthentication":
        """Create a credential from a Shared Access Signature

        :param sastoken: The SAS token. Either a string, or an object whose string representation
            is the SAS token (e.g. :class:`azure.iot.upload.sastoken.RenewableSasToken`)

        :raises: ValueError if a string token is not a valid SAS token, or has expired
        """
        if sastoken and isinstance(sastoken, str):
            try:
                sastoken = NonRenewableSasToken(sastoken)
            except SasTokenError as e:
                raise ValueError("Invalid SAS token") from e
            if sastoken.is_expired():
                raise ValueError(
                    "SAS token for {} expired at {}".format(
                        sastoken.resource_uri, sastoken.expiry_time
                    )
                )
        return cls(AuthenticationType.SAS, sastoken=sastoken)

    @classmethod
    def from_x509(cls, x509: X509) -> "UploadAuthentication":
        """Create a credential from an X509 certificate

        :param x509: The certificate used to authenticate the TLS connection
        :type x509: :class:`azure.iot.upload.models.X509`
        """
        return cls(AuthenticationType.X509, x509=x509)

    @property
    def auth_type(self) -> AuthenticationType:
        return self._auth_type

    @property
    def sastoken(self) -> str:
        """The current string value of the SAS token"""
        if self._auth_type is not AuthenticationType.SAS:
            raise AttributeError("Credential does not use SAS authentication")
        # Evaluated on each access so that renewable tokens are always current
        return str(self._sastoken)

    @property
    def x509(self) -> X509:
        if self._auth_type is not AuthenticationType.X509:
            raise AttributeError("Credential does not use X509 authentication")
        return self._x509  # type: ignore[return-value]
