"""High-level client that builds requests per route and interprets responses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..contracts.transport.interface import ApiTransport
from ..models.entities import Asset, parse_assets
from ..models.http import Request, Response
from ..models.shared import EXPECTED_ERROR_STATUSES, ApiPath, HttpMethod, HttpStatus
from ..transport.requests_client import RequestsTransport
from .config import ApiConfig, load_config
from .errors import ApiError, BadRequestError, DecodeError
from .loggers import InfoLogger, coerce_logger


class CurrencyClient:
    """Entry point consumed by SDK callers.

    Example::

        client = CurrencyClient()
        assets = client.get_assets()
        candles = client.get_ohlc({"symbol": "BTC/USD", "interval": "1h"})
    """

    def __init__(
        self,
        transport: ApiTransport | None = None,
        *,
        config: ApiConfig | Mapping[str, Any] | None = None,
        demo: bool = False,
    ) -> None:
        if transport is None:
            transport = RequestsTransport()
        if config is None:
            config = load_config()
        self._transport = transport
        self._demo = bool(demo)
        self._logger: InfoLogger | None = None
        self.set_config(config)

    # Configuration -----------------------------------------------------
    @property
    def transport(self) -> ApiTransport:
        return self._transport

    def set_transport(self, transport: ApiTransport) -> None:
        """Swap the transport, carrying the current config and logger over."""

        self._transport = transport
        transport.set_config(self._config)
        transport.set_logger(self._logger)

    def set_config(self, config: ApiConfig | Mapping[str, Any]) -> None:
        if not isinstance(config, ApiConfig):
            config = ApiConfig.from_mapping(config)
        self._config = config
        self._transport.set_config(config)

    def set_demo(self, demo: bool) -> None:
        self._demo = bool(demo)

    def is_demo(self) -> bool:
        return self._demo

    def set_auth(self, api_key: str, secret_key: str) -> None:
        self._transport.set_api_key(api_key)
        self._transport.set_secret_key(secret_key)

    def set_logger(self, value: Any) -> None:
        """Attach ``None``, a logger, an object with ``info`` or a one-argument callable."""

        self._logger = coerce_logger(value)
        self._transport.set_logger(self._logger)

    # Public routes -----------------------------------------------------
    def get_assets(self) -> list[Asset]:
        """Return the assets listed by the exchange."""

        return parse_assets(self._get_public(ApiPath.ASSETS))

    def get_ohlc(self, filters: Mapping[str, Any] | None = None) -> Any:
        """Return candlestick data matching ``filters``."""

        return self._get_public(ApiPath.OHLC, filters)

    def get_order_book(self, filters: Mapping[str, Any] | None = None) -> Any:
        """Return the order book snapshot for the requested market."""

        return self._get_public(ApiPath.ORDER_BOOK, filters)

    def get_summary(self, filters: Mapping[str, Any] | None = None) -> Any:
        return self._get_public(ApiPath.SUMMARY, filters)

    def get_ticker(self, filters: Mapping[str, Any] | None = None) -> Any:
        return self._get_public(ApiPath.TICKER, filters)

    def get_trades(self, filters: Mapping[str, Any] | None = None) -> Any:
        """Return recent trades for the requested market."""

        return self._get_public(ApiPath.TRADES, filters)

    # Response handling -------------------------------------------------
    def decode_data(self, response: Response) -> Any:
        """Decode a JSON body; malformed JSON or ``null`` is never treated as empty data."""

        try:
            payload = json.loads(response.body)
        except ValueError as exc:
            raise DecodeError(f"Failed to decode response: {exc}", body=response.body) from exc
        if payload is None:
            raise DecodeError("Failed to decode response: empty JSON document", body=response.body)
        return payload

    def handle_error(self, response: Response) -> None:
        """Raise the typed error matching a non-success response."""

        if response.status_code in EXPECTED_ERROR_STATUSES:
            raise BadRequestError(response.status_code, response.headers, response.body)
        raise ApiError(
            "Unexpected response error code",
            response.status_code,
            response.headers,
            response.body,
        )

    # Internal ----------------------------------------------------------
    def _get_public(self, path: ApiPath, filters: Mapping[str, Any] | None = None) -> Any:
        params = filters if isinstance(filters, Mapping) else {}
        request = Request(path, HttpMethod.GET, params).with_public(True).with_demo(self._demo)
        response = self._transport.call(request)
        if response.status_code != HttpStatus.OK:
            self.handle_error(response)
        return self.decode_data(response)
