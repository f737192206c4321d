from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import logging
from threading import Lock
import time
from typing import Any, Generic, TypeVar

from app.application.ports.market_data_port import MarketDataPort
from app.application.ports.metadata_cache_port import MetadataCachePort
from app.domain.entities.market_data import Asset, Pool


logger = logging.getLogger(__name__)

T = TypeVar("T")

ASSETS_KEY = "assets"
POOLS_KEY = "pools"


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    last_updated: float

    def is_valid(self, now: float, ttl_seconds: float) -> bool:
        if ttl_seconds <= 0:
            return False
        return (now - self.last_updated) < ttl_seconds


class MarketDataCache(MetadataCachePort):
    """Process-wide asset/pool metadata cache with a fixed time-to-live.

    Timestamps are wall-clock seconds so they can be reported to clients.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not entry.is_valid(now, self.ttl_seconds):
                self._entries.pop(key, None)
                return None
            return entry.value

    def put(self, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0:
            return
        with self._lock:
            self._entries[key] = CacheEntry(value=value, last_updated=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def is_valid(self) -> bool:
        now = self._clock()
        with self._lock:
            if not self._entries:
                return False
            return all(entry.is_valid(now, self.ttl_seconds) for entry in self._entries.values())

    def last_updated_ms(self) -> int | None:
        with self._lock:
            if not self._entries:
                return None
            oldest = min(entry.last_updated for entry in self._entries.values())
        return int(oldest * 1000)


class CachedMarketDataProvider(MarketDataPort):
    """Serves assets and pools from ``MarketDataCache``; swap simulations always go upstream."""

    def __init__(self, inner: MarketDataPort, cache: MarketDataCache):
        self._inner = inner
        self._cache = cache

    async def _cached(self, key: str, loader: Callable[[], Awaitable[list]]) -> list:
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("market_data_cache: hit key=%s", key)
            return cached
        # No single-flight: concurrent misses each call upstream and the last put wins.
        value = await loader()
        self._cache.put(key, value)
        logger.info("market_data_cache: refreshed key=%s size=%s", key, len(value))
        return value

    async def fetch_assets(self) -> list[Asset]:
        return await self._cached(ASSETS_KEY, self._inner.fetch_assets)

    async def fetch_pools(self) -> list[Pool]:
        return await self._cached(POOLS_KEY, self._inner.fetch_pools)

    async def simulate_swap(
        self,
        *,
        offer_address: str,
        ask_address: str,
        units: str,
        slippage_tolerance: str,
    ) -> dict[str, Any]:
        return await self._inner.simulate_swap(
            offer_address=offer_address,
            ask_address=ask_address,
            units=units,
            slippage_tolerance=slippage_tolerance,
        )
