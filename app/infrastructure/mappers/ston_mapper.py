from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.entities.market_data import Asset, Pool


ASSET_LIST_KEYS = ("asset_list", "assetList")
POOL_LIST_KEYS = ("pool_list", "poolList")

# Jetton metadata stores decimals as a uint8.
MAX_TOKEN_DECIMALS = 255


def _pick(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _decimals(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        decimals = int(str(value).strip())
    except ValueError:
        return None
    return decimals if 0 <= decimals <= MAX_TOKEN_DECIMALS else None


def unwrap_records(payload: Any, list_keys: tuple[str, ...]) -> list[Mapping[str, Any]]:
    """Accept a bare list or an object wrapping the list under one of ``list_keys``."""
    records: Any = None
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, Mapping):
        records = _pick(payload, *list_keys)
    if not isinstance(records, list):
        return []
    return [record for record in records if isinstance(record, Mapping)]


def map_record_to_asset(record: Mapping[str, Any]) -> Asset | None:
    address = _text(_pick(record, "contract_address", "contractAddress"))
    if not address:
        return None
    return Asset(
        contract_address=address,
        symbol=_text(record.get("symbol")) or "",
        display_name=_text(_pick(record, "display_name", "displayName")),
        decimals=_decimals(record.get("decimals")),
        dex_usd_price=_text(_pick(record, "dex_usd_price", "dexUsdPrice", "dex_price_usd", "dexPriceUsd")),
    )


def map_record_to_pool(record: Mapping[str, Any]) -> Pool:
    return Pool(
        address=_text(_pick(record, "address", "pool_address", "poolAddress")),
        token0_address=_text(_pick(record, "token0_address", "token0Address")),
        token1_address=_text(_pick(record, "token1_address", "token1Address")),
        reserve0=_text(record.get("reserve0")),
        reserve1=_text(record.get("reserve1")),
        lp_total_supply_usd=_text(_pick(record, "lp_total_supply_usd", "lpTotalSupplyUsd")),
        lp_total_supply=_text(_pick(record, "lp_total_supply", "lpTotalSupply")),
        volume_24h_usd=_text(_pick(record, "volume_24h_usd", "volume24hUsd")),
        apy_1d=_text(_pick(record, "apy_1d", "apy1D", "apy1d")),
        popularity_index=_text(_pick(record, "popularity_index", "popularityIndex")),
    )


def map_assets_payload(payload: Any) -> list[Asset]:
    assets = (map_record_to_asset(record) for record in unwrap_records(payload, ASSET_LIST_KEYS))
    return [asset for asset in assets if asset is not None]


def map_pools_payload(payload: Any) -> list[Pool]:
    return [map_record_to_pool(record) for record in unwrap_records(payload, POOL_LIST_KEYS)]
