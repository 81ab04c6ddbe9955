"""Adapters letting callers attach any logger-like object."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class InfoLogger(Protocol):
    def info(self, msg: str, /, *args: Any, **kwargs: Any) -> None: ...


class CallableLogger:
    """Expose a one-argument callable as a logger with ``info``."""

    def __init__(self, sink: Callable[[str], Any]) -> None:
        self._sink = sink

    def info(self, msg: str, /, *args: Any, **kwargs: Any) -> None:
        self._sink(msg % args if args else msg)


def coerce_logger(value: Any) -> InfoLogger | None:
    """Accept ``None``, a :class:`logging.Logger`, an object with ``info`` or a callable."""

    if value is None or isinstance(value, (logging.Logger, logging.LoggerAdapter)):
        return value
    if isinstance(value, type):
        raise TypeError(f"Expected a logger instance, got the class {value.__name__}")
    if isinstance(value, InfoLogger):
        return value
    if callable(value):
        return CallableLogger(value)
    raise TypeError(f"Unsupported logger type: {type(value).__name__}")
