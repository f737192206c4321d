from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from app.application.ports.market_data_port import MarketDataPort
from app.application.use_cases.get_health import GetHealthUseCase
from app.application.use_cases.get_pair_by_address import GetPairByAddressUseCase
from app.application.use_cases.list_market_data import ListAssetsUseCase, ListPoolsUseCase
from app.application.use_cases.list_pairs import ListPairsUseCase
from app.application.use_cases.search_pairs import SearchPairsUseCase
from app.application.use_cases.simulate_swap import SimulateSwapUseCase
from app.infrastructure.cache.market_data_cache import CachedMarketDataProvider, MarketDataCache
from app.infrastructure.clients.market_data_provider import StonMarketDataAdapter
from app.infrastructure.clients.ston_api_client import StonApiClient, StonApiClientSettings
from app.shared.config import get_settings


SERVER_ENVIRONMENT = "server"


@lru_cache(maxsize=1)
def _get_ston_api_client() -> StonApiClient:
    settings = get_settings()
    return StonApiClient(
        StonApiClientSettings(
            api_base=settings.ston_api_base,
            timeout_seconds=settings.ston_api_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def _get_market_data_cache() -> MarketDataCache:
    settings = get_settings()
    return MarketDataCache(ttl_seconds=settings.market_data_cache_ttl_seconds)


def get_environment_name() -> str:
    return SERVER_ENVIRONMENT


def get_market_data_port() -> MarketDataPort:
    return StonMarketDataAdapter(_get_ston_api_client())


def get_market_data_cache() -> MarketDataCache | None:
    return _get_market_data_cache()


def get_cached_market_data_port(
    market_data_port: MarketDataPort = Depends(get_market_data_port),
    cache: MarketDataCache | None = Depends(get_market_data_cache),
) -> MarketDataPort:
    if cache is None:
        return market_data_port
    return CachedMarketDataProvider(market_data_port, cache)


def get_list_pairs_use_case(
    market_data_port: MarketDataPort = Depends(get_market_data_port),
) -> ListPairsUseCase:
    return ListPairsUseCase(market_data_port=market_data_port)


def get_pair_by_address_use_case(
    market_data_port: MarketDataPort = Depends(get_cached_market_data_port),
) -> GetPairByAddressUseCase:
    return GetPairByAddressUseCase(market_data_port=market_data_port)


def get_search_pairs_use_case(
    market_data_port: MarketDataPort = Depends(get_cached_market_data_port),
) -> SearchPairsUseCase:
    return SearchPairsUseCase(market_data_port=market_data_port)


def get_list_assets_use_case(
    market_data_port: MarketDataPort = Depends(get_cached_market_data_port),
) -> ListAssetsUseCase:
    return ListAssetsUseCase(market_data_port=market_data_port)


def get_list_pools_use_case(
    market_data_port: MarketDataPort = Depends(get_cached_market_data_port),
) -> ListPoolsUseCase:
    return ListPoolsUseCase(market_data_port=market_data_port)


def get_simulate_swap_use_case(
    market_data_port: MarketDataPort = Depends(get_market_data_port),
) -> SimulateSwapUseCase:
    return SimulateSwapUseCase(market_data_port=market_data_port)


def get_health_use_case(
    environment: str = Depends(get_environment_name),
    cache: MarketDataCache | None = Depends(get_market_data_cache),
) -> GetHealthUseCase:
    return GetHealthUseCase(environment=environment, metadata_cache=cache)
