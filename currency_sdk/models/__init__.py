"""Domain models for the currency API client."""

from .entities import Asset, parse_assets
from .http import Request, RequestBody, Response
from .shared import EXPECTED_ERROR_STATUSES, ApiPath, HttpMethod, HttpStatus

__all__ = [
    "Asset",
    "parse_assets",
    "Request",
    "RequestBody",
    "Response",
    "ApiPath",
    "HttpMethod",
    "HttpStatus",
    "EXPECTED_ERROR_STATUSES",
]
