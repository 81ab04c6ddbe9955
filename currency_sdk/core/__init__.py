"""Core utilities for the currency API client."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "CurrencyClient",
    "ApiConfig",
    "load_config",
    "CurrencyApiError",
    "AuthorizeError",
    "ApiConnectionError",
    "ApiError",
    "BadRequestError",
    "DecodeError",
]

_lazy_targets = {
    "CurrencyClient": ("coordinator", "CurrencyClient"),
    "ApiConfig": ("config", "ApiConfig"),
    "load_config": ("config", "load_config"),
    "CurrencyApiError": ("errors", "CurrencyApiError"),
    "AuthorizeError": ("errors", "AuthorizeError"),
    "ApiConnectionError": ("errors", "ApiConnectionError"),
    "ApiError": ("errors", "ApiError"),
    "BadRequestError": ("errors", "BadRequestError"),
    "DecodeError": ("errors", "DecodeError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:  # pragma: no cover - defensive
        raise AttributeError(f"module 'currency_sdk.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
