from __future__ import annotations

import asyncio
import logging
import time

from app.application.ports.market_data_port import MarketDataPort
from app.domain.entities.market_data import Asset, Pool
from app.domain.entities.trading_pair import TradingPair
from app.domain.services.pair_derivation import derive_trading_pairs


logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    return int(time.time() * 1000)


async def fetch_market_data(market_data_port: MarketDataPort) -> tuple[list[Asset], list[Pool]]:
    assets, pools = await asyncio.gather(
        market_data_port.fetch_assets(),
        market_data_port.fetch_pools(),
    )
    return assets, pools


async def load_trading_pairs(market_data_port: MarketDataPort) -> list[TradingPair]:
    assets, pools = await fetch_market_data(market_data_port)
    pairs = derive_trading_pairs(assets, pools)
    logger.info(
        "pairs: derived assets=%s pools=%s pairs=%s dropped_pools=%s",
        len(assets),
        len(pools),
        len(pairs),
        len(pools) - len(pairs),
    )
    return pairs
