from __future__ import annotations

from typing import Any

from app.application.ports.market_data_port import MarketDataPort
from app.domain.entities.market_data import Asset, Pool
from app.domain.exceptions import UpstreamFetchError
from app.infrastructure.clients.ston_api_client import StonApiClient, StonApiError
from app.infrastructure.mappers.ston_mapper import map_assets_payload, map_pools_payload


class StonMarketDataAdapter(MarketDataPort):
    def __init__(self, client: StonApiClient):
        self._client = client

    async def fetch_assets(self) -> list[Asset]:
        try:
            payload = await self._client.get_assets()
        except StonApiError as exc:
            raise UpstreamFetchError(str(exc)) from exc
        return map_assets_payload(payload)

    async def fetch_pools(self) -> list[Pool]:
        try:
            payload = await self._client.get_pools()
        except StonApiError as exc:
            raise UpstreamFetchError(str(exc)) from exc
        return map_pools_payload(payload)

    async def simulate_swap(
        self,
        *,
        offer_address: str,
        ask_address: str,
        units: str,
        slippage_tolerance: str,
    ) -> dict[str, Any]:
        try:
            payload = await self._client.simulate_swap(
                offer_address=offer_address,
                ask_address=ask_address,
                units=units,
                slippage_tolerance=slippage_tolerance,
            )
        except StonApiError as exc:
            raise UpstreamFetchError(str(exc)) from exc
        if not isinstance(payload, dict):
            raise UpstreamFetchError("Unexpected swap simulation payload.")
        return payload
