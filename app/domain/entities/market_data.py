from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Asset:
    contract_address: str
    symbol: str
    display_name: str | None = None
    decimals: int | None = None
    dex_usd_price: str | None = None


@dataclass(frozen=True)
class Pool:
    address: str | None
    token0_address: str | None
    token1_address: str | None
    reserve0: str | None = None
    reserve1: str | None = None
    lp_total_supply_usd: str | None = None
    lp_total_supply: str | None = None
    volume_24h_usd: str | None = None
    apy_1d: str | None = None
    popularity_index: str | None = None
