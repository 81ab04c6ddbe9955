"""Typed records parsed from API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.errors import DecodeError


@dataclass(frozen=True, slots=True)
class Asset:
    """Asset metadata as listed by the ``/assets`` route."""

    name: str
    id: str | None = None
    description: str | None = None
    can_deposit: bool = False
    can_withdraw: bool = False
    maker_fee: Decimal | None = None
    taker_fee: Decimal | None = None
    min_withdraw: Decimal | None = None
    max_withdraw: Decimal | None = None

    @classmethod
    def from_payload(cls, raw: Any, *, asset_id: str | None = None) -> Asset:
        """Build an asset from one decoded entry, ignoring unknown fields."""

        if not isinstance(raw, Mapping):
            raise DecodeError(f"Unexpected asset payload structure: {raw!r}")
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise DecodeError("Asset payload is missing the required 'name' field")
        identifier = raw.get("id") or asset_id
        description = raw.get("description")
        return cls(
            name=name,
            id=str(identifier) if identifier else None,
            description=str(description) if description is not None else None,
            can_deposit=_to_bool(raw, "can_deposit"),
            can_withdraw=_to_bool(raw, "can_withdraw"),
            maker_fee=_to_decimal(raw, "maker_fee"),
            taker_fee=_to_decimal(raw, "taker_fee"),
            min_withdraw=_to_decimal(raw, "min_withdraw"),
            max_withdraw=_to_decimal(raw, "max_withdraw"),
        )


def parse_assets(payload: Any) -> list[Asset]:
    """Parse a list of assets or a mapping keyed by asset id."""

    if isinstance(payload, Mapping):
        return [Asset.from_payload(entry, asset_id=str(key)) for key, entry in payload.items()]
    if isinstance(payload, list):
        return [Asset.from_payload(entry) for entry in payload]
    raise DecodeError(f"Unexpected assets payload type: {type(payload).__name__}")


def _to_decimal(raw: Mapping[str, Any], key: str) -> Decimal | None:
    value = raw.get(key)
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise DecodeError(f"Asset field {key!r} is not numeric: {value!r}") from exc


def _to_bool(raw: Mapping[str, Any], key: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false", "1", "0"):
        return value.strip().lower() in ("true", "1")
    raise DecodeError(f"Asset field {key!r} is not a boolean flag: {value!r}")
