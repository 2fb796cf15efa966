from __future__ import annotations

from typing import Any

import httpx


class SywClientError(Exception):
    """Base client error."""


class NetworkError(SywClientError):
    """Transport/network layer error."""


class UnsupportedMethodError(SywClientError, ValueError):
    def __init__(self, method: str):
        super().__init__(f"unsupported HTTP method {method!r}, expected 'get' or 'post'")
        self.method = method


class ResponseParseError(SywClientError):
    """Response body present but not valid JSON."""

    def __init__(self, status_code: int, reason: str, response: httpx.Response | None = None):
        super().__init__(f"JSON parseError with HTTP Status: {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason
        self.response = response


class ApiError(SywClientError):
    """Decoded body carries an ``errors`` field.

    ``errors`` holds that field exactly as the server sent it (usually a list).
    Callback users get this exception as ``error`` and read the payload from
    ``error.errors``.
    """

    def __init__(self, errors: Any, status_code: int | None = None):
        super().__init__(str(errors))
        self.errors = errors
        self.status_code = status_code


class HttpStatusError(SywClientError):
    def __init__(
            self,
            status_code: int,
            reason: str,
            data: Any = None,
            response: httpx.Response | None = None,
    ):
        super().__init__(f"HTTP Error: {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason
        self.data = data
        self.response = response


class AuthError(HttpStatusError):
    """Auth-related HTTP status (401/403)."""
