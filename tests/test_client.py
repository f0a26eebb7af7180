import logging

import httpx
import pytest

from talenthub.api.client import extract_error_message, get_client, handle_http_error
from talenthub.core.errors import AuthRejected, TransportFailure

logger = logging.getLogger("tests.client")
REQUEST = httpx.Request("POST", "http://auth.test/api/login")


@pytest.mark.parametrize(
    "response, expected",
    [
        (httpx.Response(401, json={"error": "Invalid credentials"}), "Invalid credentials"),
        (httpx.Response(400, json={"message": "Email taken"}), "Email taken"),
        (httpx.Response(400, json={"error": "Wins", "message": "Loses"}), "Wins"),
        (httpx.Response(400, json={"error": "", "message": "Fallback field"}), "Fallback field"),
        (httpx.Response(400, json={"error": 42}), "Authentication failed"),
        (httpx.Response(400, json={"detail": "other shape"}), "Authentication failed"),
        (httpx.Response(400, json=["error"]), "Authentication failed"),
        (httpx.Response(502, text="<html>Bad gateway</html>"), "Authentication failed"),
        (httpx.Response(500), "Authentication failed"),
    ],
)
def test_extract_error_message(response, expected):
    assert extract_error_message(response) == expected


def test_status_error_becomes_auth_rejected():
    response = httpx.Response(401, json={"error": "Invalid credentials"}, request=REQUEST)
    error = httpx.HTTPStatusError("401", request=REQUEST, response=response)
    result = handle_http_error(error, "Login", logger)
    assert isinstance(result, AuthRejected)
    assert result.message == "Invalid credentials"
    assert result.status_code == 401


def test_network_error_becomes_transport_failure():
    result = handle_http_error(httpx.ConnectError("refused", request=REQUEST), "Login", logger)
    assert isinstance(result, TransportFailure)
    assert result.message


def test_timeout_becomes_transport_failure():
    result = handle_http_error(httpx.ReadTimeout("slow", request=REQUEST), "Login", logger)
    assert isinstance(result, TransportFailure)
    assert "too long" in result.message


def test_unexpected_error_becomes_transport_failure():
    result = handle_http_error(RuntimeError("boom"), "Login", logger)
    assert isinstance(result, TransportFailure)


async def test_get_client_uses_given_settings():
    async with get_client("http://auth.test/api", 3.0) as client:
        assert str(client.base_url) == "http://auth.test/api/"
        assert client.timeout.read == 3.0
        assert client.headers["Content-Type"] == "application/json"
