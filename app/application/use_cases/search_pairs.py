from __future__ import annotations

from collections.abc import Callable

from app.application.dto.pairs import SearchPairsInput, SearchPairsOutput
from app.application.ports.market_data_port import MarketDataPort
from app.application.use_cases.pairs_common import epoch_millis, load_trading_pairs
from app.domain.services.pair_query import search_pairs


class SearchPairsUseCase:
    def __init__(
        self,
        *,
        market_data_port: MarketDataPort,
        clock: Callable[[], int] = epoch_millis,
    ):
        self._market_data_port = market_data_port
        self._clock = clock

    async def execute(self, command: SearchPairsInput) -> SearchPairsOutput:
        pairs = await load_trading_pairs(self._market_data_port)
        matches = search_pairs(pairs, command.query.strip())
        return SearchPairsOutput(
            query=command.query,
            data=matches,
            total_results=len(matches),
            last_updated=self._clock(),
        )
