# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest

"""
NOTE: Tests that need some kind of non-specific, arbitrary exception should use one of the
following fixtures. The exception is a subclass of Exception or BaseException that is not
defined anywhere else, so it cannot be accidentally handled by anything but broad
all-encompassing handling, and tests checking that it is raised will not spuriously pass due to
a different exception being raised.
"""


@pytest.fixture
def arbitrary_exception():
    class ArbitraryException(Exception):
        pass

    return ArbitraryException("arbitrary exception")


@pytest.fixture
def arbitrary_base_exception():
    class ArbitraryBaseException(BaseException):
        pass

    return ArbitraryBaseException("arbitrary base exception")


@pytest.fixture
def fake_return_arg_value():
    return "__fake_return_arg_value__"
