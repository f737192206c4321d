from __future__ import annotations

from collections.abc import Callable

from app.application.dto.pairs import GetPairByAddressInput, GetPairByAddressOutput
from app.application.ports.market_data_port import MarketDataPort
from app.application.use_cases.pairs_common import epoch_millis, load_trading_pairs
from app.domain.exceptions import PairNotFoundError


class GetPairByAddressUseCase:
    def __init__(
        self,
        *,
        market_data_port: MarketDataPort,
        clock: Callable[[], int] = epoch_millis,
    ):
        self._market_data_port = market_data_port
        self._clock = clock

    async def execute(self, command: GetPairByAddressInput) -> GetPairByAddressOutput:
        pairs = await load_trading_pairs(self._market_data_port)
        pair = next((row for row in pairs if row.pool_address == command.pool_address), None)
        if pair is None:
            raise PairNotFoundError(f"No trading pair found for pool address: {command.pool_address}")
        return GetPairByAddressOutput(pair=pair, last_updated=self._clock())
