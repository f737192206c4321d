from __future__ import annotations

from app.application.dto.pairs import ListAssetsOutput, ListPoolsOutput
from app.application.ports.market_data_port import MarketDataPort


class ListAssetsUseCase:
    def __init__(self, *, market_data_port: MarketDataPort):
        self._market_data_port = market_data_port

    async def execute(self) -> ListAssetsOutput:
        assets = await self._market_data_port.fetch_assets()
        return ListAssetsOutput(data=assets, total=len(assets))


class ListPoolsUseCase:
    def __init__(self, *, market_data_port: MarketDataPort):
        self._market_data_port = market_data_port

    async def execute(self) -> ListPoolsOutput:
        pools = await self._market_data_port.fetch_pools()
        return ListPoolsOutput(data=pools, total=len(pools))
