import pytest
from fastapi.testclient import TestClient

from security_headers import SECURITY_HEADERS
from server import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def assert_security_headers(headers):
    for name, value in SECURITY_HEADERS.items():
        assert headers.get(name) == value, name
