# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module signs SAS tokens with the shared access key of an IoTHub connection string"""

import base64
import binascii
import hashlib
import hmac
from typing import Union


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


class SymmetricKeySigningMechanism:
    """Signs data with HMAC-SHA256, using a base64 encoded symmetric key"""

    def __init__(self, key: Union[str, bytes]) -> None:
        """
        :param key: The shared access key, base64 encoded
        :type key: str or bytes

        :raises: ValueError if the key is not valid base64
        """
        try:
            self._signing_key = base64.b64decode(_to_bytes(key), validate=True)
        except (binascii.Error, TypeError) as e:
            raise ValueError("Invalid Symmetric Key") from e

    def sign(self, data: Union[str, bytes]) -> str:
        """Return the base64 encoded HMAC-SHA256 signature of the data

        :param data: Data to be signed
        :type data: str or bytes
        """
        digest = hmac.new(self._signing_key, _to_bytes(data), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("utf-8")
