# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import time
import logging
import urllib.parse
from azure.iot.upload.sastoken import (
    RenewableSasToken,
    NonRenewableSasToken,
    SasTokenError,
    parse_sastoken,
)

logging.basicConfig(level=logging.DEBUG)

fake_uri = "some/resource/location"
fake_signed_data = "ajsc8nLKacIjGsYyB4iYDFCZaRMmmDrUuY5lncYDYPI="
fake_key_name = "fakekeyname"
fake_expiry = 12321312


def token_parser(token_str):
    """helper function that parses a token string for individual values"""
    token_map = {}
    kv_string = token_str.split(" ")[1]
    kv_pairs = kv_string.split("&")
    for kv in kv_pairs:
        t = kv.split("=")
        token_map[t[0]] = t[1]
    return token_map


@pytest.fixture
def signing_mechanism(mocker):
    mechanism = mocker.MagicMock()
    mechanism.sign.return_value = fake_signed_data
    return mechanism


@pytest.mark.describe("RenewableSasToken")
class TestRenewableSasToken(object):
    @pytest.mark.it("Instantiates with a default TTL of 3600 seconds if no TTL is provided")
    def test_default_ttl(self, signing_mechanism):
        s = RenewableSasToken(fake_uri, signing_mechanism)
        assert s.ttl == 3600

    @pytest.mark.it(
        "Instantiates with an expiry time TTL seconds in the future from the moment of instantiation"
    )
    def test_expiry_time(self, mocker, signing_mechanism):
        mocker.patch.object(time, "time", return_value=1000)
        s = RenewableSasToken(fake_uri, signing_mechanism, ttl=100)
        assert s.expiry_time == 1100

    @pytest.mark.it("Signs the URL encoded URI and the expiry time with the signing mechanism")
    def test_signs_data(self, mocker, signing_mechanism):
        mocker.patch.object(time, "time", return_value=1000)
        RenewableSasToken(fake_uri, signing_mechanism, ttl=100)
        assert signing_mechanism.sign.call_args == mocker.call(
            urllib.parse.quote(fake_uri, safe="") + "\n1100"
        )

    @pytest.mark.it("Builds a token without a key name if none is provided")
    def test_simple_token(self, signing_mechanism):
        s = RenewableSasToken(fake_uri, signing_mechanism)
        token_map = token_parser(str(s))
        assert str(s).startswith("SharedAccessSignature ")
        assert token_map["sr"] == urllib.parse.quote(fake_uri, safe="")
        assert token_map["sig"] == urllib.parse.quote(fake_signed_data, safe="")
        assert token_map["se"] == str(s.expiry_time)
        assert "skn" not in token_map

    @pytest.mark.it("Builds a token with the key name if one is provided")
    def test_key_name_token(self, signing_mechanism):
        s = RenewableSasToken(fake_uri, signing_mechanism, key_name=fake_key_name)
        assert token_parser(str(s))["skn"] == fake_key_name

    @pytest.mark.it("Generates a new expiry time and token when refreshed")
    def test_refresh(self, mocker, signing_mechanism):
        mock_time = mocker.patch.object(time, "time", return_value=1000)
        s = RenewableSasToken(fake_uri, signing_mechanism, ttl=100)
        mock_time.return_value = 2000
        s.refresh()
        assert s.expiry_time == 2100
        assert token_parser(str(s))["se"] == "2100"

    @pytest.mark.it("Raises SasTokenError if the signing mechanism fails")
    def test_signing_failure(self, signing_mechanism, arbitrary_exception):
        signing_mechanism.sign.side_effect = arbitrary_exception
        with pytest.raises(SasTokenError) as e_info:
            RenewableSasToken(fake_uri, signing_mechanism)
        assert e_info.value.__cause__ is arbitrary_exception


@pytest.mark.describe("NonRenewableSasToken")
class TestNonRenewableSasToken(object):
    @pytest.mark.it("Parses the expiry time and resource URI from a SAS token string")
    def test_parses_string(self):
        token_str = "SharedAccessSignature sr={}&sig={}&se={}".format(
            urllib.parse.quote(fake_uri, safe=""), "fakesig", fake_expiry
        )
        s = NonRenewableSasToken(token_str)
        assert str(s) == token_str
        assert s.expiry_time == fake_expiry
        assert s.resource_uri == fake_uri

    @pytest.mark.it("Accepts a key name field")
    def test_key_name(self):
        s = NonRenewableSasToken("SharedAccessSignature sr=a&sig=b&se=1&skn=c")
        assert s.expiry_time == 1

    @pytest.mark.it("Reports whether the token has expired")
    def test_is_expired(self, mocker):
        mocker.patch.object(time, "time", return_value=fake_expiry + 1)
        s = NonRenewableSasToken("SharedAccessSignature sr=a&sig=b&se={}".format(fake_expiry))
        assert s.is_expired()

    @pytest.mark.it("Raises SasTokenError if the string is not a valid SAS token")
    @pytest.mark.parametrize(
        "token_str",
        [
            pytest.param("sr=a&sig=b&se=1", id="Missing prefix"),
            pytest.param("SharedAccessSignature sr=a&sig=b", id="Missing required field"),
            pytest.param("SharedAccessSignature sr=a&sig=b&se=1&foo=bar", id="Unexpected field"),
            pytest.param("SharedAccessSignature sr=a&sig&se=1", id="Incorrectly formatted"),
            pytest.param("SharedAccessSignature sr=a&sig=b&se=never", id="Non-numeric expiry"),
        ],
    )
    def test_invalid(self, token_str):
        with pytest.raises(SasTokenError):
            NonRenewableSasToken(token_str)

    @pytest.mark.it("Reports that the token has not expired before its expiry time")
    def test_not_expired(self, mocker):
        mocker.patch.object(time, "time", return_value=fake_expiry - 1)
        s = NonRenewableSasToken("SharedAccessSignature sr=a&sig=b&se={}".format(fake_expiry))
        assert not s.is_expired()


@pytest.mark.describe(".parse_sastoken()")
class TestParseSasToken(object):
    @pytest.mark.it("Returns the fields of the token, without decoding them")
    def test_fields(self):
        fields = parse_sastoken("SharedAccessSignature sr=a%2Fb&sig=c%3D&se=1&skn=d")
        assert fields == {"sr": "a%2Fb", "sig": "c%3D", "se": "1", "skn": "d"}

    @pytest.mark.it("Parses a token built by RenewableSasToken")
    def test_round_trip(self, signing_mechanism):
        token = RenewableSasToken(fake_uri, signing_mechanism, key_name=fake_key_name)
        fields = parse_sastoken(str(token))
        assert fields["se"] == str(token.expiry_time)
        assert fields["skn"] == fake_key_name
