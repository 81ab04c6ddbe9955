"""Base URL configuration and its loader."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CURRENCY_SDK_CONFIG"
DEFAULT_CONFIG_RESOURCE = "config.json"


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """The three base URLs a request can be routed to."""

    public: str
    base: str
    base_demo: str

    def __post_init__(self) -> None:
        for name in ("public", "base", "base_demo"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"ApiConfig.{name} must be a non-empty URL string")
            object.__setattr__(self, name, value.rstrip("/"))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ApiConfig:
        """Build a config from a ``{"public", "base", "baseDemo"}`` mapping."""

        base_demo = data.get("baseDemo", data.get("base_demo"))
        missing = [
            key
            for key, value in (("public", data.get("public")), ("base", data.get("base")), ("baseDemo", base_demo))
            if not value
        ]
        if missing:
            raise ValueError(f"Configuration is missing base URL(s): {', '.join(missing)}")
        return cls(public=data["public"], base=data["base"], base_demo=base_demo)

    def resolve(self, *, is_public: bool, is_demo: bool) -> str:
        if is_public:
            return self.public
        return self.base_demo if is_demo else self.base


def load_config(path: str | os.PathLike[str] | None = None) -> ApiConfig:
    """Load base URLs from ``path``, ``$CURRENCY_SDK_CONFIG`` or the packaged default."""

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        source = "package default"
        text = resources.files("currency_sdk").joinpath(DEFAULT_CONFIG_RESOURCE).read_text(encoding="utf-8")
    else:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")
        source = str(file_path)
        text = file_path.read_text(encoding="utf-8")

    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ValueError(f"Configuration {source} is not valid JSON") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration {source} must be a JSON object")
    logger.debug("Loaded API configuration from %s", source)
    return ApiConfig.from_mapping(data)
