from __future__ import annotations

import logging

from app.application.dto.pairs import SimulateSwapInput, SimulateSwapOutput
from app.application.ports.market_data_port import MarketDataPort
from app.domain.exceptions import SwapSimulationInputError


logger = logging.getLogger(__name__)

DEFAULT_SLIPPAGE_TOLERANCE = "0.001"


class SimulateSwapUseCase:
    def __init__(self, *, market_data_port: MarketDataPort):
        self._market_data_port = market_data_port

    async def execute(self, command: SimulateSwapInput) -> SimulateSwapOutput:
        if not command.offer_address or not command.ask_address or not command.units:
            raise SwapSimulationInputError(
                "Missing required parameters: tokenAAddress, tokenBAddress, amountIn"
            )

        slippage = command.slippage_tolerance or DEFAULT_SLIPPAGE_TOLERANCE
        logger.info(
            "simulate_swap: offer=%s ask=%s units=%s slippage=%s",
            command.offer_address,
            command.ask_address,
            command.units,
            slippage,
        )
        payload = await self._market_data_port.simulate_swap(
            offer_address=command.offer_address,
            ask_address=command.ask_address,
            units=command.units,
            slippage_tolerance=slippage,
        )
        return SimulateSwapOutput(data=payload)
