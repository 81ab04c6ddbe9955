from __future__ import annotations

import dataclasses
import json
from decimal import Decimal

import pytest

from currency_sdk.core.config import CONFIG_ENV_VAR, ApiConfig, load_config
from currency_sdk.core.errors import ApiError, DecodeError
from currency_sdk.models.entities import Asset, parse_assets
from currency_sdk.models.http import Request, Response
from currency_sdk.models.shared import EXPECTED_ERROR_STATUSES, ApiPath, HttpMethod, HttpStatus

CONFIG_DATA = {
    "public": "https://public.example.com/api/",
    "base": "https://live.example.com/api",
    "baseDemo": "https://demo.example.com/api",
}


# Request / Response ----------------------------------------------------
def test_request_defaults():
    request = Request(ApiPath.ASSETS)

    assert request.method is HttpMethod.GET
    assert request.params == {}
    assert request.headers == {}
    assert request.body is None
    assert request.is_public is False
    assert request.is_demo is False


def test_request_coerces_method_strings():
    assert Request("/custom", "post").method is HttpMethod.POST
    assert Request("/custom", "DELETE").method is HttpMethod.DELETE


def test_request_rejects_unknown_verb():
    with pytest.raises(ApiError, match="Invalid method verb: FETCH"):
        Request(ApiPath.TICKER, "FETCH")


def test_flag_setters_return_modified_copies():
    request = Request(ApiPath.TRADES, params={"symbol": "BTC/USD"})

    flagged = request.with_public(True).with_demo(True)

    assert flagged.is_public and flagged.is_demo
    assert flagged.params == {"symbol": "BTC/USD"}
    assert request.is_public is False
    assert request.is_demo is False


def test_request_and_response_are_frozen():
    request = Request(ApiPath.SUMMARY)
    response = Response(200, {"Server": "nginx"}, "{}")

    with pytest.raises(dataclasses.FrozenInstanceError):
        request.is_public = True  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.status_code = 500  # type: ignore[misc]


def test_response_headers_are_read_only():
    source = {"Server": "nginx"}
    response = Response(200, source, "{}")
    source["Server"] = "changed"

    assert response.headers == {"Server": "nginx"}
    with pytest.raises(TypeError):
        response.headers["Server"] = "apache"  # type: ignore[index]


def test_request_copies_params():
    params = {"a": "1"}
    request = Request(ApiPath.OHLC, params=params)
    params["b"] = "2"

    assert request.params == {"a": "1"}


def test_expected_error_statuses_exclude_success_and_503():
    assert HttpStatus.OK not in EXPECTED_ERROR_STATUSES
    assert 404 in EXPECTED_ERROR_STATUSES
    assert 503 not in EXPECTED_ERROR_STATUSES


def test_api_path_values():
    assert [path.value for path in ApiPath] == [
        "/assets",
        "/OHLC",
        "/orderbook",
        "/summary",
        "/ticker",
        "/trades",
    ]


# Configuration ---------------------------------------------------------
def test_config_from_mapping_strips_trailing_slashes():
    config = ApiConfig.from_mapping(CONFIG_DATA)

    assert config.public == "https://public.example.com/api"
    assert config.resolve(is_public=True, is_demo=True) == config.public
    assert config.resolve(is_public=False, is_demo=False) == "https://live.example.com/api"
    assert config.resolve(is_public=False, is_demo=True) == "https://demo.example.com/api"


def test_config_accepts_snake_case_demo_key():
    data = {"public": "https://p", "base": "https://b", "base_demo": "https://d"}

    assert ApiConfig.from_mapping(data).base_demo == "https://d"


def test_config_missing_demo_url_is_rejected():
    data = {key: value for key, value in CONFIG_DATA.items() if key != "baseDemo"}

    with pytest.raises(ValueError, match="baseDemo"):
        ApiConfig.from_mapping(data)


def test_load_config_from_explicit_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(CONFIG_DATA), encoding="utf-8")

    assert load_config(path).base == "https://live.example.com/api"


def test_load_config_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps(CONFIG_DATA), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().base_demo == "https://demo.example.com/api"


def test_load_config_packaged_default(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    config = load_config()

    assert config.public.startswith("https://")
    assert config.base.startswith("https://")
    assert config.base_demo.startswith("https://")


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_config(broken)


# Entities --------------------------------------------------------------
def test_parse_assets_from_id_keyed_mapping():
    payload = {
        "BTC": {
            "name": "Bitcoin",
            "can_deposit": True,
            "can_withdraw": False,
            "maker_fee": 0.001,
            "taker_fee": "0.002",
            "min_withdraw": "0.0005",
            "unified_cryptoasset_id": 1,
        }
    }

    (asset,) = parse_assets(payload)

    assert asset.id == "BTC"
    assert asset.name == "Bitcoin"
    assert asset.can_deposit is True
    assert asset.can_withdraw is False
    assert asset.maker_fee == Decimal("0.001")
    assert asset.taker_fee == Decimal("0.002")
    assert asset.min_withdraw == Decimal("0.0005")
    assert asset.max_withdraw is None


def test_parse_assets_from_list():
    assets = parse_assets([{"id": "ETH", "name": "Ethereum"}, {"name": "Tether", "description": "USDT"}])

    assert [asset.id for asset in assets] == ["ETH", None]
    assert assets[1].description == "USDT"


def test_asset_missing_name_is_decode_error():
    with pytest.raises(DecodeError, match="name"):
        Asset.from_payload({"id": "BTC"})


def test_asset_rejects_non_numeric_fee():
    with pytest.raises(DecodeError, match="maker_fee"):
        Asset.from_payload({"name": "Bitcoin", "maker_fee": "cheap"})


@pytest.mark.parametrize(
    ("raw_flag", "expected"),
    [
        (True, True),
        (False, False),
        ("true", True),
        ("FALSE", False),
        ("false", False),
        (1, True),
        (0, False),
        ("1", True),
        ("0", False),
    ],
)
def test_asset_flags_are_parsed_explicitly(raw_flag, expected):
    asset = Asset.from_payload({"name": "Bitcoin", "can_deposit": raw_flag, "can_withdraw": raw_flag})

    assert asset.can_deposit is expected
    assert asset.can_withdraw is expected


def test_asset_missing_flags_default_to_false():
    asset = Asset.from_payload({"name": "Bitcoin", "can_deposit": None})

    assert asset.can_deposit is False
    assert asset.can_withdraw is False


@pytest.mark.parametrize("raw_flag", ["yes", 2, 0.5, [], {}])
def test_asset_rejects_unrecognized_flag(raw_flag):
    with pytest.raises(DecodeError, match="can_withdraw"):
        Asset.from_payload({"name": "Bitcoin", "can_withdraw": raw_flag})


def test_parse_assets_rejects_scalar_payload():
    with pytest.raises(DecodeError):
        parse_assets("BTC")
    with pytest.raises(DecodeError):
        parse_assets(["BTC"])
