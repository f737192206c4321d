from __future__ import annotations

from typing import Any, Protocol

from app.domain.entities.market_data import Asset, Pool


class MarketDataPort(Protocol):
    async def fetch_assets(self) -> list[Asset]:
        ...

    async def fetch_pools(self) -> list[Pool]:
        ...

    async def simulate_swap(
        self,
        *,
        offer_address: str,
        ask_address: str,
        units: str,
        slippage_tolerance: str,
    ) -> dict[str, Any]:
        ...
