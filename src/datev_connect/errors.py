"""Errors raised by the DATEVconnect client."""

from __future__ import annotations

from typing import Any, Optional


class DatevConnectError(Exception):
    """Base class for DATEVconnect client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DatevConnectRequestError(DatevConnectError):
    """A request failed: non-2xx status, unusable body or transport failure."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
        response_body: Any = None,
        url: Optional[str] = None,
        method: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
        self.response_body = response_body
        self.url = url
        self.method = method


class DatevConnectTimeoutError(DatevConnectRequestError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(self, message: str, timeout: float, url: str, method: Optional[str] = None) -> None:
        super().__init__(message, url=url, method=method)
        self.timeout = timeout


__all__ = [
    "DatevConnectError",
    "DatevConnectRequestError",
    "DatevConnectTimeoutError",
]
