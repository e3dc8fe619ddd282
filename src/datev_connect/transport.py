"""
Transport - one timeout-bounded HTTP request per DATEVconnect call.

Every endpoint wrapper goes through send_request(), which builds the URL,
attaches the bearer token and client instance header, serialises query
parameters and classifies the response via ensure_success(). Nothing here
retries: a failed request surfaces as DatevConnectRequestError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote, urljoin

import requests
from requests.exceptions import RequestException, Timeout

from .config import get_settings
from .errors import DatevConnectRequestError, DatevConnectTimeoutError


logger = logging.getLogger(__name__)

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JsonObject = Dict[str, Any]
Query = Mapping[str, Any]

JSON_CONTENT_TYPE = "application/json"
DEFAULT_ERROR_PREFIX = "DATEVconnect request failed"
CLIENT_INSTANCE_HEADER = "x-client-instance-id"
LOGIN_PATH = "api/auth/login"


@dataclass(frozen=True)
class AuthContext:
    """Everything a wrapper needs to issue an authenticated request."""

    host: str
    token: str
    client_instance_id: str
    session: Optional[requests.Session] = None
    timeout: Optional[float] = None


@dataclass(frozen=True)
class RequestContext(AuthContext):
    """AuthContext plus the path identifiers resolved for one item."""

    client_id: Optional[str] = None
    fiscal_year_id: Optional[str] = None


# ==============================================================================
# URL and header helpers
# ==============================================================================

def normalise_base_url(host: str) -> str:
    """Return ``host`` with exactly one trailing slash."""
    if not host:
        raise ValueError("DATEVconnect host must be provided")
    return host if host.endswith("/") else f"{host}/"


def build_api_url(host: str, path: str) -> str:
    """Resolve an API path against the host; a leading slash is ignored."""
    trimmed = path[1:] if path.startswith("/") else path
    return urljoin(normalise_base_url(host), trimmed)


def quote_segment(value: Any) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    return quote(str(value), safe="-_.!~*'()")


def build_headers(headers: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """Drop headers whose value is empty."""
    return {key: value for key, value in headers.items() if value}


def build_query(query: Optional[Query]) -> Dict[str, str]:
    """Serialise query parameters, skipping None; 0 and "" are caller decisions."""
    params: Dict[str, str] = {}
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


# ==============================================================================
# Response classification
# ==============================================================================

def read_response_body(response: requests.Response) -> JsonValue:
    """
    Read the body as JSON when the content type says so, else as text.

    Returns None for an empty body or unparseable JSON.
    """
    content_type = response.headers.get("content-type") or ""
    if JSON_CONTENT_TYPE in content_type.lower():
        try:
            return response.json()
        except ValueError:
            return None

    text = response.text
    return text if text else None


def extract_error_message(response: requests.Response, body: JsonValue) -> str:
    """
    Build a human-readable message for a failed response.

    Example: ``DATEVconnect request failed (401 Unauthorized): Something went wrong``
    """
    status_part = f"{response.status_code} {response.reason or ''}".strip()
    prefix = f"{DEFAULT_ERROR_PREFIX} ({status_part})" if status_part else DEFAULT_ERROR_PREFIX

    if isinstance(body, str) and body.strip():
        return f"{prefix}: {body.strip()}"

    if isinstance(body, dict):
        message = body.get("message") if isinstance(body.get("message"), str) else None
        if not message:
            message = body.get("error") if isinstance(body.get("error"), str) else None
        description = body.get("error_description")
        if message:
            if isinstance(description, str) and description:
                return f"{prefix}: {message}: {description}"
            return f"{prefix}: {message}"

    return prefix


def ensure_success(response: requests.Response) -> Union[JsonObject, List[Any], None]:
    """
    Classify a response.

    Returns:
        The parsed object/array body, or None when the body is empty.

    Raises:
        DatevConnectRequestError: On a non-2xx status or a non-JSON body.
    """
    body = read_response_body(response)
    method = response.request.method if response.request is not None else None

    if not 200 <= response.status_code < 300:
        raise DatevConnectRequestError(
            extract_error_message(response, body),
            status_code=response.status_code,
            status_text=response.reason,
            response_body=body,
            url=response.url,
            method=method,
        )

    if isinstance(body, (dict, list)):
        return body

    if body is None:
        return None

    raise DatevConnectRequestError(
        f"{DEFAULT_ERROR_PREFIX}: Expected JSON response body.",
        status_code=response.status_code,
        status_text=response.reason,
        response_body=body,
        url=response.url,
        method=method,
    )


# ==============================================================================
# Requests
# ==============================================================================

def _perform(
    session: Optional[requests.Session],
    method: str,
    url: str,
    timeout: float,
    **kwargs: Any,
) -> requests.Response:
    """Issue exactly one request, mapping transport failures to client errors."""
    sender = session if session is not None else requests
    try:
        return sender.request(method, url, timeout=timeout, **kwargs)
    except Timeout as e:
        raise DatevConnectTimeoutError(
            f"{DEFAULT_ERROR_PREFIX}: Request timed out after {timeout}s",
            timeout=timeout,
            url=url,
            method=method,
        ) from e
    except RequestException as e:
        raise DatevConnectRequestError(
            f"{DEFAULT_ERROR_PREFIX}: {e}",
            url=url,
            method=method,
        ) from e


def send_request(
    auth: AuthContext,
    path: str,
    method: str = "GET",
    query: Optional[Query] = None,
    body: Any = None,
) -> Union[JsonObject, List[Any], None]:
    """
    Send one authenticated DATEVconnect request.

    Args:
        auth: Host, token and client instance id
        path: API path relative to the host
        method: HTTP method
        query: Query parameters (None values are dropped)
        body: JSON body; omitted when None

    Returns:
        Parsed JSON body, or None when the API returned no content.
    """
    settings = get_settings()
    url = build_api_url(auth.host, path)
    headers = build_headers({
        "accept": JSON_CONTENT_TYPE,
        "authorization": f"Bearer {auth.token}" if auth.token else None,
        "content-type": JSON_CONTENT_TYPE,
        CLIENT_INSTANCE_HEADER: auth.client_instance_id,
        "user-agent": settings.user_agent,
    })
    timeout = auth.timeout or settings.request_timeout_s

    kwargs: Dict[str, Any] = {"headers": headers, "params": build_query(query)}
    if body is not None:
        kwargs["json"] = body

    response = _perform(auth.session, method, url, timeout, **kwargs)
    logger.debug("DATEVconnect %s %s -> %s", method, path, response.status_code)
    return ensure_success(response)


def fetch_payload(
    auth: AuthContext,
    path: str,
    what: str,
    query: Optional[Query] = None,
) -> Union[JsonObject, List[Any]]:
    """GET a resource whose response must carry a body."""
    body = send_request(auth, path, query=query)
    if body is None:
        raise DatevConnectRequestError(f"{DEFAULT_ERROR_PREFIX}: Expected {what} payload.")
    return body


def authenticate(
    host: str,
    email: str,
    password: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> JsonObject:
    """
    Log in with email and password.

    Returns:
        The login response; ``access_token`` is guaranteed to be a string.
    """
    settings = get_settings()
    url = build_api_url(host, LOGIN_PATH)
    response = _perform(
        session,
        "POST",
        url,
        timeout or settings.request_timeout_s,
        headers=build_headers({
            "content-type": JSON_CONTENT_TYPE,
            "user-agent": settings.user_agent,
        }),
        json={"email": email, "password": password},
    )
    body = ensure_success(response)

    if not isinstance(body, dict) or not isinstance(body.get("access_token"), str):
        raise DatevConnectRequestError(
            f"{DEFAULT_ERROR_PREFIX}: Authentication response missing access_token.",
            status_code=response.status_code,
            url=url,
            method="POST",
        )

    logger.debug("DATEVconnect authentication succeeded for %s", normalise_base_url(host))
    return body


__all__ = [
    "AuthContext",
    "RequestContext",
    "JsonValue",
    "JsonObject",
    "JSON_CONTENT_TYPE",
    "DEFAULT_ERROR_PREFIX",
    "CLIENT_INSTANCE_HEADER",
    "LOGIN_PATH",
    "normalise_base_url",
    "build_api_url",
    "quote_segment",
    "build_headers",
    "build_query",
    "read_response_body",
    "extract_error_message",
    "ensure_success",
    "send_request",
    "fetch_payload",
    "authenticate",
]
