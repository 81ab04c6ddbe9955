"""Custom exception hierarchy for the currency API client."""

from __future__ import annotations

import json
from collections.abc import Mapping


class CurrencyApiError(RuntimeError):
    """Base class for all client exceptions."""


class AuthorizeError(CurrencyApiError):
    """Raised before any I/O when a private request lacks credentials."""


class ApiConnectionError(CurrencyApiError):
    """Represents transport failures such as DNS, refused connections, TLS or timeouts."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ApiError(CurrencyApiError):
    """Generic API failure carrying the raw exchange for inspection."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is None:
            return message
        return f"{message} (HTTP {self.status_code})"


class BadRequestError(ApiError):
    """The API rejected the request with one of its documented error statuses."""

    def __init__(self, status_code: int, headers: Mapping[str, str] | None = None, body: str | None = None) -> None:
        super().__init__(_extract_message(body) or "Bad API request", status_code, headers, body)


class DecodeError(CurrencyApiError):
    """Raised when a response body cannot be decoded into the expected shape."""

    def __init__(self, message: str, *, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


def _extract_message(body: str | None) -> str | None:
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if isinstance(payload, dict):
        for key in ("error", "message", "description"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return None
