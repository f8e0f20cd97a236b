"""
Shared fixtures for ProxerPy tests
"""

import pytest

from ProxerPy.clients.base_transport import RawResponse, StubTransport
from ProxerPy.clients.options import ProxerOptions, TEST_MODE
from ProxerPy.clients.proxer_client import ProxerClient
from ProxerPy.clients.request import ProxerRequest


@pytest.fixture
def ok_transport():
    """Stub transport answering every call with a successful body"""
    return StubTransport({"*": RawResponse(status_code=200, body={"error": 0, "data": "x"})})


@pytest.fixture
def client(ok_transport):
    return ProxerClient.create("api-key-123", transport=ok_transport)


@pytest.fixture
def test_mode_client(ok_transport):
    return ProxerClient.create(TEST_MODE, transport=ok_transport)


@pytest.fixture
def local_options():
    return ProxerOptions(host="localhost", port=4000, use_ssl=False, device="tests/1.0")


@pytest.fixture
def entry_request():
    return ProxerRequest(api_class="info", api_func="entry", get_args={"id": "53"})
