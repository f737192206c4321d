from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PairToken:
    symbol: str
    name: str
    address: str
    decimals: int | None
    usd_price: Decimal


@dataclass(frozen=True)
class PairReserves:
    token0: Decimal
    token1: Decimal


@dataclass(frozen=True)
class TradingPair:
    id: str
    name: str
    token0: PairToken
    token1: PairToken
    price: Decimal
    formatted_price: str
    liquidity: Decimal
    volume_24h: Decimal
    apy: Decimal
    pool_address: str
    reserves: PairReserves
    popularity_index: Decimal
