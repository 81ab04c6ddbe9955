"""Protocols describing API transports."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...core.config import ApiConfig
from ...core.loggers import InfoLogger
from ...models.http import Request, Response


@runtime_checkable
class ApiTransport(Protocol):
    """Performs exactly one HTTP exchange per :meth:`call`."""

    # Exchange ----------------------------------------------------------
    def call(self, request: Request) -> Response:
        """Execute ``request`` and return the raw response without judging its status."""

    def close(self) -> None:
        """Release any connection kept alive between calls."""

    # Configuration -----------------------------------------------------
    def set_config(self, config: ApiConfig) -> None:
        """Set the base URLs requests are routed to."""

    def set_api_key(self, api_key: str | None) -> None:
        """Set the Basic auth user name used for private requests."""

    def set_secret_key(self, secret_key: str | None) -> None:
        """Set the Basic auth password used for private requests."""

    def set_timeout(self, timeout: float) -> None:
        """Set the response timeout in seconds."""

    def set_connection_timeout(self, timeout: float) -> None:
        """Set the connection-establish timeout in seconds."""

    def set_keep_alive(self, keep_alive: bool) -> None:
        """Choose whether the connection is reused across calls."""

    def set_logger(self, logger: InfoLogger | None) -> None:
        """Attach (or detach) the logger receiving request/response lines."""
