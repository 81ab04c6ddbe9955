"""Client library for the Currency market data API.

This module exposes the request/response model, the transport contract and its
requests-based implementation, the client facade and the error hierarchy.
"""

from .contracts.transport.interface import ApiTransport
from .core.config import ApiConfig, load_config
from .core.coordinator import CurrencyClient
from .core.errors import (
    ApiConnectionError,
    ApiError,
    AuthorizeError,
    BadRequestError,
    CurrencyApiError,
    DecodeError,
)
from .models.entities import Asset
from .models.http import Request, Response
from .models.shared import EXPECTED_ERROR_STATUSES, ApiPath, HttpMethod, HttpStatus
from .transport.headers import parse_raw_headers
from .transport.requests_client import RequestsTransport

__version__ = "1.0.0"

__all__ = [
    "ApiTransport",
    "ApiConfig",
    "load_config",
    "CurrencyClient",
    "Asset",
    "Request",
    "Response",
    "ApiPath",
    "HttpMethod",
    "HttpStatus",
    "EXPECTED_ERROR_STATUSES",
    "parse_raw_headers",
    "RequestsTransport",
    "CurrencyApiError",
    "AuthorizeError",
    "ApiConnectionError",
    "ApiError",
    "BadRequestError",
    "DecodeError",
]
