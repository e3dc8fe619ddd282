"""Tests for the DATEVconnect transport layer."""
import pytest
import requests

from datev_connect.errors import DatevConnectRequestError, DatevConnectTimeoutError
from datev_connect.transport import (
    CLIENT_INSTANCE_HEADER,
    authenticate,
    build_api_url,
    build_query,
    ensure_success,
    fetch_payload,
    normalise_base_url,
    quote_segment,
    send_request,
)


class TestUrlHelpers:
    """Test URL and query helpers."""

    def test_normalise_adds_single_trailing_slash(self):
        """Host gets exactly one trailing slash."""
        assert normalise_base_url("https://datev.example.com") == "https://datev.example.com/"
        assert normalise_base_url("https://datev.example.com/") == "https://datev.example.com/"

    def test_normalise_rejects_empty_host(self):
        """An empty host is a configuration error."""
        with pytest.raises(ValueError, match="host must be provided"):
            normalise_base_url("")

    def test_build_api_url_keeps_host_path(self):
        """API paths resolve below a host that carries a path prefix."""
        url = build_api_url("https://datev.example.com/gateway", "/datevconnect/master-data/v1/clients")

        assert url == "https://datev.example.com/gateway/datevconnect/master-data/v1/clients"

    def test_quote_segment_encodes_slashes(self):
        """Identifiers cannot escape their path segment."""
        assert quote_segment("a/b c") == "a%2Fb%20c"
        assert quote_segment(42) == "42"

    def test_build_query_serialises_values(self):
        """None is dropped, zero kept, booleans rendered lower-case."""
        query = build_query({"top": 0, "skip": None, "flag": True, "other": False, "select": "id"})

        assert query == {"top": "0", "flag": "true", "other": "false", "select": "id"}


class TestEnsureSuccess:
    """Test response classification."""

    def test_error_message_from_json_message(self, make_response):
        """Status line and API message form the error text."""
        response = make_response(401, {"message": "Something went wrong"}, reason="Unauthorized")

        with pytest.raises(DatevConnectRequestError) as exc_info:
            ensure_success(response)

        assert exc_info.value.message == "DATEVconnect request failed (401 Unauthorized): Something went wrong"
        assert exc_info.value.status_code == 401
        assert exc_info.value.response_body == {"message": "Something went wrong"}
        assert exc_info.value.method == "GET"

    def test_error_message_with_description(self, make_response):
        """OAuth-style error and error_description are combined."""
        response = make_response(
            400, {"error": "invalid_grant", "error_description": "Bad password"}, reason="Bad Request",
        )

        with pytest.raises(DatevConnectRequestError) as exc_info:
            ensure_success(response)

        assert exc_info.value.message == "DATEVconnect request failed (400 Bad Request): invalid_grant: Bad password"

    def test_error_message_from_text_body(self, make_response):
        """A plain text error body is appended verbatim."""
        response = make_response(
            500, "  upstream unavailable \n", content_type="text/plain", reason="Internal Server Error",
        )

        with pytest.raises(DatevConnectRequestError) as exc_info:
            ensure_success(response)

        assert exc_info.value.message == (
            "DATEVconnect request failed (500 Internal Server Error): upstream unavailable"
        )

    def test_error_without_usable_body(self, make_response):
        """Without a message only the status line is reported."""
        response = make_response(404, {"code": 17}, reason="Not Found")

        with pytest.raises(DatevConnectRequestError) as exc_info:
            ensure_success(response)

        assert exc_info.value.message == "DATEVconnect request failed (404 Not Found)"

    @pytest.mark.parametrize("status,reason", [(300, "Multiple Choices"), (304, "Not Modified")])
    def test_redirect_status_is_an_error(self, make_response, status, reason):
        """Only 2xx counts as success, even without a body."""
        with pytest.raises(DatevConnectRequestError) as exc_info:
            ensure_success(make_response(status, None, reason=reason))

        assert exc_info.value.status_code == status
        assert exc_info.value.message == f"DATEVconnect request failed ({status} {reason})"

    def test_success_returns_json(self, make_response):
        """Objects and arrays are returned as parsed."""
        assert ensure_success(make_response(body={"id": "1"})) == {"id": "1"}
        assert ensure_success(make_response(body=[1, 2])) == [1, 2]

    def test_empty_body_returns_none(self, make_response):
        """204 No Content is a success without payload."""
        assert ensure_success(make_response(204, None, reason="No Content")) is None

    def test_unparseable_json_is_treated_as_empty(self, make_response):
        """A JSON content type with a broken body reads as no body."""
        response = make_response(200, "{not json", content_type="application/json")

        assert ensure_success(response) is None

    def test_non_json_success_body_rejected(self, make_response):
        """A 2xx text body is not a valid API response."""
        response = make_response(200, "hello", content_type="text/plain")

        with pytest.raises(DatevConnectRequestError) as exc_info:
            ensure_success(response)

        assert exc_info.value.message == "DATEVconnect request failed: Expected JSON response body."


class TestSendRequest:
    """Test send_request and fetch_payload."""

    def test_sends_auth_headers_and_query(self, auth, session, make_response):
        """Bearer token, client instance id and query are attached."""
        session.request.return_value = make_response(body={"ok": True})

        result = send_request(auth, "datevconnect/master-data/v1/clients", query={"top": 100, "skip": None})

        assert result == {"ok": True}
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://datev.example.com/datevconnect/master-data/v1/clients")
        assert kwargs["headers"]["authorization"] == "Bearer token-123"
        assert kwargs["headers"][CLIENT_INSTANCE_HEADER] == "instance-1"
        assert kwargs["headers"]["accept"] == "application/json"
        assert kwargs["headers"]["user-agent"] == "datev-connect-nodes"
        assert kwargs["params"] == {"top": "100"}
        assert kwargs["timeout"] == 5.0
        assert "json" not in kwargs

    def test_sends_json_body(self, auth, session):
        """A body is sent as JSON."""
        send_request(auth, "x", method="POST", body={"name": "Neu"})

        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"name": "Neu"}

    def test_timeout_maps_to_timeout_error(self, auth, session):
        """A requests timeout surfaces as DatevConnectTimeoutError."""
        session.request.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(DatevConnectTimeoutError) as exc_info:
            send_request(auth, "x")

        assert exc_info.value.timeout == 5.0
        assert "timed out" in exc_info.value.message

    def test_connection_error_maps_to_request_error(self, auth, session):
        """Transport failures keep the standard prefix."""
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(DatevConnectRequestError) as exc_info:
            send_request(auth, "x")

        assert exc_info.value.message.startswith("DATEVconnect request failed: ")
        assert exc_info.value.status_code is None

    def test_request_is_sent_once(self, auth, session, make_response):
        """Failures are not retried."""
        session.request.return_value = make_response(503, {"message": "busy"}, reason="Service Unavailable")

        with pytest.raises(DatevConnectRequestError):
            send_request(auth, "x")

        assert session.request.call_count == 1

    def test_fetch_payload_requires_body(self, auth, session, make_response):
        """Reads without a body fail with the resource name."""
        session.request.return_value = make_response(204, None, reason="No Content")

        with pytest.raises(DatevConnectRequestError) as exc_info:
            fetch_payload(auth, "x", "clients")

        assert exc_info.value.message == "DATEVconnect request failed: Expected clients payload."


class TestAuthenticate:
    """Test the login call."""

    def test_returns_login_response(self, session, make_response):
        """The login body is returned with its access token."""
        session.request.return_value = make_response(body={"access_token": "abc", "expires_in": 3600})

        result = authenticate("https://datev.example.com", "user@example.com", "secret", session=session)

        assert result["access_token"] == "abc"
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://datev.example.com/api/auth/login")
        assert kwargs["json"] == {"email": "user@example.com", "password": "secret"}
        assert "authorization" not in kwargs["headers"]

    def test_missing_access_token(self, session, make_response):
        """A login response without a token string is rejected."""
        session.request.return_value = make_response(body={"token_type": "bearer"})

        with pytest.raises(DatevConnectRequestError) as exc_info:
            authenticate("https://datev.example.com", "user@example.com", "secret", session=session)

        assert exc_info.value.message == "DATEVconnect request failed: Authentication response missing access_token."

    def test_rejected_login(self, session, make_response):
        """A 401 from the login endpoint carries the API message."""
        session.request.return_value = make_response(
            401, {"message": "Invalid credentials"}, reason="Unauthorized", method="POST",
        )

        with pytest.raises(DatevConnectRequestError) as exc_info:
            authenticate("https://datev.example.com", "user@example.com", "wrong", session=session)

        assert exc_info.value.status_code == 401
        assert exc_info.value.message.endswith("Invalid credentials")
