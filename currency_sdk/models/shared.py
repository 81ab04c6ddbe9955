"""Shared enumerations used by requests, transports and the client facade."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class HttpMethod(StrEnum):
    """HTTP verbs understood by the transport."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ApiPath(StrEnum):
    """Route fragments exposed by the market data API."""

    ASSETS = "/assets"
    OHLC = "/OHLC"
    ORDER_BOOK = "/orderbook"
    SUMMARY = "/summary"
    TICKER = "/ticker"
    TRADES = "/trades"


class HttpStatus(IntEnum):
    """Status codes the API documents for its responses."""

    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    UNSUPPORTED_MEDIA_TYPE = 415
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500


# Well-formed API rejections; anything else besides ``OK`` is unexpected.
EXPECTED_ERROR_STATUSES: frozenset[int] = frozenset(
    status for status in HttpStatus if status is not HttpStatus.OK
)
