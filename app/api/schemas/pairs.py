from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PairTokenResponse(CamelModel):
    symbol: str
    name: str
    address: str
    decimals: int | None
    usd_price: float


class PairReservesResponse(CamelModel):
    token0: float
    token1: float


class TradingPairResponse(CamelModel):
    id: str
    name: str
    token0: PairTokenResponse
    token1: PairTokenResponse
    price: float
    formatted_price: str
    liquidity: float
    volume_24h: float = Field(alias="volume24h")
    apy: float
    pool_address: str
    reserves: PairReservesResponse
    popularity_index: float


class PaginationResponse(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool
    start_index: int
    end_index: int


class PairFiltersResponse(CamelModel):
    search: str
    sort_by: str
    sort_order: str
    min_liquidity: float
    category: str


class PairListResponse(CamelModel):
    success: bool = True
    data: list[TradingPairResponse]
    pagination: PaginationResponse
    filters: PairFiltersResponse
    cached: bool = False
    total_pairs: int
    last_updated: int
    price_data_fresh: bool = True


class PairDetailResponse(CamelModel):
    success: bool = True
    data: TradingPairResponse
    last_updated: int


class PairSearchResponse(CamelModel):
    success: bool = True
    data: list[TradingPairResponse]
    query: str
    total_results: int
    last_updated: int


class AssetResponse(CamelModel):
    contract_address: str
    symbol: str
    display_name: str | None
    decimals: int | None
    dex_usd_price: str | None


class PoolResponse(CamelModel):
    address: str | None
    token0_address: str | None
    token1_address: str | None
    reserve0: str | None
    reserve1: str | None
    lp_total_supply_usd: str | None
    lp_total_supply: str | None
    volume_24h_usd: str | None = Field(alias="volume24hUsd")
    apy_1d: str | None = Field(alias="apy1D")
    popularity_index: str | None


class AssetListResponse(CamelModel):
    success: bool = True
    data: list[AssetResponse]
    total_assets: int


class PoolListResponse(CamelModel):
    success: bool = True
    data: list[PoolResponse]
    total_pools: int


class SimulateSwapRequest(CamelModel):
    token_a_address: str | None = None
    token_b_address: str | None = None
    amount_in: str | int | None = None
    slippage_tolerance: str | float | None = None


class SimulateSwapResponse(CamelModel):
    success: bool = True
    data: dict[str, Any]


class HealthCacheResponse(CamelModel):
    price_data_cached: bool = False
    assets_metadata_cached: bool
    last_metadata_update: int | None


class HealthResponse(CamelModel):
    success: bool = True
    message: str
    timestamp: str
    environment: str
    cache: HealthCacheResponse
