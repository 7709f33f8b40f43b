# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Connection Strings"""

import logging
from collections.abc import Mapping
from .sastoken import RenewableSasToken
from .signing_mechanism import SymmetricKeySigningMechanism

__all__ = ["ConnectionString", "parse"]

logger = logging.getLogger(__name__)

CS_DELIMITER = ";"
CS_VAL_SEPARATOR = "="

HOST_NAME = "HostName"
SHARED_ACCESS_KEY_NAME = "SharedAccessKeyName"
SHARED_ACCESS_KEY = "SharedAccessKey"

SERVICE_REQUIRED_KEYS = [HOST_NAME, SHARED_ACCESS_KEY_NAME, SHARED_ACCESS_KEY]


class ConnectionString(Mapping):
    """Key/value mappings for connection details.
    Uses the same syntax as dictionary
    """

    def __init__(self, connection_string, required_keys=None):
        """Initializer for ConnectionString

        :param str connection_string: String with connection details provided by Azure
        :param list required_keys: Keys that must be present in the connection string (optional)
        :raises: ValueError if provided connection_string is invalid
        :raises: TypeError if provided connection_string is not a string
        """
        self._dict = _parse_connection_string(connection_string)
        _validate_required_keys(self._dict, required_keys or [])
        self._strrep = connection_string

    @classmethod
    def parse(cls, source, required_keys=None):
        """Parse a connection string, validating that all required keys are present

        :param str source: String with connection details provided by Azure
        :param list required_keys: Keys that must be present in the connection string (optional)
        :returns: The parsed ConnectionString
        """
        return cls(source, required_keys)

    def __getitem__(self, key):
        return self._dict[key]

    def __iter__(self):
        return iter(self._dict)

    def __len__(self):
        return len(self._dict)

    def __repr__(self):
        return self._strrep

    def generate_sastoken(self, ttl=3600):
        """Generate a SAS token for the hub described by a service connection string

        :param int ttl: Time to live for the token, in seconds (default 3600)
        :returns: A token that can be renewed with .refresh()
        :rtype: :class:`azure.iot.upload.sastoken.RenewableSasToken`
        :raises: ValueError if the connection string is not a service connection string
        """
        _validate_required_keys(self._dict, SERVICE_REQUIRED_KEYS)
        signing_mechanism = SymmetricKeySigningMechanism(self._dict[SHARED_ACCESS_KEY])
        return RenewableSasToken(
            uri=self._dict[HOST_NAME],
            signing_mechanism=signing_mechanism,
            key_name=self._dict[SHARED_ACCESS_KEY_NAME],
            ttl=ttl,
        )


def parse(source):
    """Parse an IoTHub service connection string

    :param str source: String of the form "HostName=...;SharedAccessKeyName=...;SharedAccessKey=..."
    :returns: The parsed ConnectionString
    :raises: ValueError if HostName, SharedAccessKeyName or SharedAccessKey is not found
    """
    return ConnectionString.parse(source, SERVICE_REQUIRED_KEYS)


def _parse_connection_string(connection_string):
    """Return a dictionary of values contained in a given connection string"""
    if connection_string is None:
        raise ValueError("Connection String cannot be 'None'")
    if not isinstance(connection_string, str):
        raise TypeError("Connection String must be of type str")
    if not connection_string:
        raise ValueError("Connection String cannot be empty")

    d = {}
    # Empty segments (e.g. from a trailing delimiter) are skipped. Duplicate keys are rejected
    cs_args = [arg for arg in connection_string.split(CS_DELIMITER) if arg]
    for arg in cs_args:
        key, sep, value = arg.partition(CS_VAL_SEPARATOR)
        if not sep or not key or key in d:
            raise ValueError("Invalid Connection String - Unable to parse")
        d[key] = value
    return d


def _validate_required_keys(d, required_keys):
    """Raise ValueError if any of required_keys is not in dict d"""
    for key in required_keys:
        if key not in d:
            logger.debug("Connection String is missing required field {}".format(key))
            raise ValueError("Invalid Connection String - Missing required field: {}".format(key))
