# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import pytest
import logging
from azure.iot.upload import http_map_error
from azure.iot.upload import exceptions

logging.basicConfig(level=logging.DEBUG)


@pytest.mark.describe(".translate_error()")
class TestTranslateError(object):
    @pytest.mark.it("Returns the error corresponding to the status code")
    @pytest.mark.parametrize(
        "status_code, expected_error",
        [
            pytest.param(400, exceptions.ArgumentError, id="400"),
            pytest.param(401, exceptions.UnauthorizedError, id="401"),
            pytest.param(403, exceptions.TooManyDevicesError, id="403"),
            pytest.param(408, exceptions.DeviceTimeoutError, id="408"),
            pytest.param(409, exceptions.DeviceAlreadyExistsError, id="409"),
            pytest.param(412, exceptions.InvalidEtagError, id="412"),
            pytest.param(429, exceptions.ThrottlingError, id="429"),
            pytest.param(500, exceptions.InternalServerError, id="500"),
            pytest.param(502, exceptions.BadDeviceResponseError, id="502"),
            pytest.param(503, exceptions.ServiceUnavailableError, id="503"),
            pytest.param(504, exceptions.GatewayTimeoutError, id="504"),
        ],
    )
    def test_status_codes(self, status_code, expected_error):
        error = http_map_error.translate_error(status_code, "__fake_reason__")
        assert type(error) is expected_error
        assert isinstance(error, exceptions.IoTHubError)
        assert error.status_code == status_code
        assert error.reason == "__fake_reason__"

    @pytest.mark.it("Distinguishes 404 errors by reason")
    @pytest.mark.parametrize(
        "reason, expected_error",
        [
            pytest.param("Device Not Found", exceptions.DeviceNotFoundError, id="Device"),
            pytest.param("IoTHub Not Found", exceptions.IotHubNotFoundError, id="IoTHub"),
            pytest.param("Not Found", exceptions.NotFoundError, id="Other"),
        ],
    )
    def test_not_found(self, reason, expected_error):
        error = http_map_error.translate_error(404, reason)
        assert type(error) is expected_error

    @pytest.mark.it("Returns a generic IoTHubError for an unknown status code")
    def test_unknown(self):
        error = http_map_error.translate_error(418, "I'm a teapot")
        assert type(error) is exceptions.IoTHubError
        assert "418" in str(error)
