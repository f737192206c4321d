from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.entities.market_data import Asset, Pool
from app.domain.entities.pagination import Pagination
from app.domain.entities.pair_query import PairFilters
from app.domain.entities.trading_pair import TradingPair


@dataclass(frozen=True)
class ListPairsInput:
    page: str | None = None
    limit: str | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    min_liquidity: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class ListPairsOutput:
    data: list[TradingPair]
    pagination: Pagination
    filters: PairFilters
    total_pairs: int
    last_updated: int


@dataclass(frozen=True)
class GetPairByAddressInput:
    pool_address: str


@dataclass(frozen=True)
class GetPairByAddressOutput:
    pair: TradingPair
    last_updated: int


@dataclass(frozen=True)
class SearchPairsInput:
    query: str


@dataclass(frozen=True)
class SearchPairsOutput:
    query: str
    data: list[TradingPair]
    total_results: int
    last_updated: int


@dataclass(frozen=True)
class ListAssetsOutput:
    data: list[Asset]
    total: int


@dataclass(frozen=True)
class ListPoolsOutput:
    data: list[Pool]
    total: int


@dataclass(frozen=True)
class SimulateSwapInput:
    offer_address: str | None
    ask_address: str | None
    units: str | None
    slippage_tolerance: str | None = None


@dataclass(frozen=True)
class SimulateSwapOutput:
    data: dict[str, Any]


@dataclass(frozen=True)
class HealthOutput:
    message: str
    timestamp: str
    environment: str
    assets_metadata_cached: bool
    last_metadata_update: int | None
