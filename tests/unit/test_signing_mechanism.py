# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import pytest
import base64
import hashlib
import hmac
import logging
from azure.iot.upload.signing_mechanism import SymmetricKeySigningMechanism

logging.basicConfig(level=logging.DEBUG)

fake_key = "Zm9vYmFy"


@pytest.mark.describe("SymmetricKeySigningMechanism")
class TestSymmetricKeySigningMechanism(object):
    @pytest.mark.it("Accepts a base64 encoded key as str or bytes")
    @pytest.mark.parametrize(
        "key",
        [pytest.param(fake_key, id="str"), pytest.param(fake_key.encode("utf-8"), id="bytes")],
    )
    def test_key_types(self, key):
        mechanism = SymmetricKeySigningMechanism(key)
        assert mechanism._signing_key == b"foobar"

    @pytest.mark.it("Raises ValueError if the key is not base64 encoded")
    @pytest.mark.parametrize(
        "key",
        [
            pytest.param("not base64!", id="Invalid characters"),
            pytest.param("Zm9vYmF", id="Incorrect padding"),
            pytest.param(None, id="None"),
        ],
    )
    def test_invalid_key(self, key):
        with pytest.raises(ValueError):
            SymmetricKeySigningMechanism(key)

    @pytest.mark.it("Signs data with HMAC-SHA256 and returns the base64 encoded signature")
    @pytest.mark.parametrize(
        "data", [pytest.param("some data", id="str"), pytest.param(b"some data", id="bytes")]
    )
    def test_sign(self, data):
        mechanism = SymmetricKeySigningMechanism(fake_key)
        expected = base64.b64encode(
            hmac.HMAC(key=b"foobar", msg=b"some data", digestmod=hashlib.sha256).digest()
        ).decode("utf-8")
        assert mechanism.sign(data) == expected
