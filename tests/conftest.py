"""Pytest configuration and fixtures."""
import json
import os
from unittest.mock import MagicMock

import pytest
import requests

# Set test environment variables
os.environ["DATEV_CONNECT_ENV"] = "test"
os.environ["DATEV_CONNECT_LOG_LEVEL"] = "DEBUG"
os.environ["DATEV_CONNECT_REQUEST_TIMEOUT_S"] = "5"

HOST = "https://datev.example.com"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    from datev_connect.config import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects."""

    def _make(
        status=200,
        body=None,
        content_type="application/json",
        reason="OK",
        method="GET",
        url=f"{HOST}/datevconnect",
    ):
        response = requests.Response()
        response.status_code = status
        response.reason = reason
        response.url = url
        response.encoding = "utf-8"
        if body is None:
            response._content = b""
        elif isinstance(body, (dict, list)):
            response._content = json.dumps(body).encode("utf-8")
        else:
            response._content = str(body).encode("utf-8")
        if content_type:
            response.headers["content-type"] = content_type
        response.request = requests.Request(method, url).prepare()
        return response

    return _make


@pytest.fixture
def session(make_response):
    """Mock requests.Session answering every request with an empty JSON object."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.request.return_value = make_response(body={})
    return mock_session


@pytest.fixture
def auth(session):
    """AuthContext bound to the mock session."""
    from datev_connect.transport import AuthContext

    return AuthContext(
        host=HOST,
        token="token-123",
        client_instance_id="instance-1",
        session=session,
        timeout=5.0,
    )


@pytest.fixture
def request_context(session):
    """RequestContext for client 1000 / fiscal year 2024."""
    from datev_connect.transport import RequestContext

    return RequestContext(
        host=HOST,
        token="token-123",
        client_instance_id="instance-1",
        session=session,
        timeout=5.0,
        client_id="1000",
        fiscal_year_id="2024",
    )


@pytest.fixture
def credentials():
    """Complete DATEVconnect credential values."""
    return {
        "host": HOST,
        "email": "user@example.com",
        "password": "secret",
        "clientInstanceId": "instance-1",
    }


@pytest.fixture
def sample_clients():
    """Sample master-data client list."""
    return [
        {"id": "c-1", "name": "Musterfirma GmbH", "number": 10001},
        {"id": "c-2", "name": "Beispiel AG", "number": 10002},
    ]
