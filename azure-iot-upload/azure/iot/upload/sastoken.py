# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the Shared Access Signature (SAS) tokens sent in the Authorization header
of file upload requests.

A token has the form "SharedAccessSignature sr=<resource>&sig=<signature>&se=<expiry>", with an
optional "&skn=<key name>" when it was signed with a shared access policy key.
"""

import logging
import time
import urllib.parse
from typing import Dict, Optional
from .signing_mechanism import SymmetricKeySigningMechanism

logger = logging.getLogger(__name__)

SASTOKEN_PREFIX = "SharedAccessSignature "

FIELD_RESOURCE = "sr"
FIELD_SIGNATURE = "sig"
FIELD_EXPIRY = "se"
FIELD_KEY_NAME = "skn"

REQUIRED_FIELDS = (FIELD_RESOURCE, FIELD_SIGNATURE, FIELD_EXPIRY)
OPTIONAL_FIELDS = (FIELD_KEY_NAME,)


class SasTokenError(Exception):
    """A SAS token could not be built or parsed"""

    pass


class RenewableSasToken:
    """A SAS token signed locally, which can be re-signed with a new expiry by calling .refresh()

    Data Attributes:
    ttl (int): Time to live for the token, in seconds
    """

    def __init__(
        self,
        uri: str,
        signing_mechanism: SymmetricKeySigningMechanism,
        key_name: Optional[str] = None,
        ttl: int = 3600,
    ) -> None:
        """
        :param str uri: URI of the resource to be accessed (e.g. the IoTHub hostname)
        :param signing_mechanism: Object with a .sign() method used to produce the signature
        :param str key_name: Name of the shared access policy the key belongs to (optional)
        :param int ttl: Time to live for the token, in seconds (default 3600)

        :raises: SasTokenError if the token cannot be signed
        """
        self._resource = urllib.parse.quote(uri, safe="")
        self._signing_mechanism = signing_mechanism
        self._key_name = key_name
        self.ttl = ttl
        self._expiry_time = 0
        self._token = ""
        self.refresh()

    def __str__(self) -> str:
        return self._token

    @property
    def expiry_time(self) -> int:
        """Time the token expires, in seconds since the epoch"""
        return self._expiry_time

    def refresh(self) -> None:
        """Sign a new token, expiring ttl seconds from now"""
        expiry_time = int(time.time() + self.ttl)
        try:
            signature = self._signing_mechanism.sign("{}\n{}".format(self._resource, expiry_time))
        except Exception as e:
            raise SasTokenError("Unable to sign SAS token for '{}'".format(self._resource)) from e

        fields = {
            FIELD_RESOURCE: self._resource,
            FIELD_SIGNATURE: urllib.parse.quote(signature, safe=""),
            FIELD_EXPIRY: str(expiry_time),
        }
        if self._key_name:
            fields[FIELD_KEY_NAME] = self._key_name

        self._expiry_time = expiry_time
        self._token = _format_sastoken(fields)
        logger.debug("Signed SAS token for {}, expiring at {}".format(self._resource, expiry_time))


class NonRenewableSasToken:
    """A SAS token provided as a string, signed elsewhere.

    It cannot be renewed. Once it has expired, a new token must be obtained.
    """

    def __init__(self, sastoken_string: str) -> None:
        """
        :param str sastoken_string: The SAS token

        :raises: SasTokenError if the string is not a valid SAS token
        """
        self._fields = parse_sastoken(sastoken_string)
        self._token = sastoken_string

    def __str__(self) -> str:
        return self._token

    @property
    def expiry_time(self) -> int:
        """Time the token expires, in seconds since the epoch"""
        return int(self._fields[FIELD_EXPIRY])

    @property
    def resource_uri(self) -> str:
        return urllib.parse.unquote(self._fields[FIELD_RESOURCE])

    def is_expired(self) -> bool:
        return time.time() >= self.expiry_time


def parse_sastoken(sastoken_string: str) -> Dict[str, str]:
    """Return the fields of a SAS token string

    :param str sastoken_string: The SAS token
    :returns: Mapping of field name (e.g. "sr") to its value, as found in the token
    :raises: SasTokenError if the string is not a valid SAS token
    """
    if not sastoken_string.startswith(SASTOKEN_PREFIX):
        raise SasTokenError("Invalid SAS token: missing 'SharedAccessSignature' prefix")

    fields = {}
    for segment in sastoken_string[len(SASTOKEN_PREFIX) :].split("&"):
        name, sep, value = segment.partition("=")
        if not sep or not name.strip():
            raise SasTokenError("Invalid SAS token: unable to parse '{}'".format(segment))
        fields[name.strip()] = value.strip()

    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        raise SasTokenError("Invalid SAS token: missing field(s) {}".format(", ".join(missing)))
    unexpected = [name for name in fields if name not in REQUIRED_FIELDS + OPTIONAL_FIELDS]
    if unexpected:
        raise SasTokenError(
            "Invalid SAS token: unexpected field(s) {}".format(", ".join(unexpected))
        )
    if not fields[FIELD_EXPIRY].isdigit():
        raise SasTokenError(
            "Invalid SAS token: expiry '{}' is not a timestamp".format(fields[FIELD_EXPIRY])
        )

    return fields


def _format_sastoken(fields: Dict[str, str]) -> str:
    return SASTOKEN_PREFIX + "&".join(
        "{}={}".format(name, value) for (name, value) in fields.items()
    )
